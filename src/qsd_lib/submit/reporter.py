# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from rich.console import Console
from rich.text import Text

from qsd_lib.backend import JobHandle, ValidationOutcome
from qsd_lib.core.config import CFG
from qsd_lib.properties import OutputFormat


class ResultReporter:
    """
    Presentation layer for the results of a submission.

    Results are written to standard output, errors to standard error. Styling
    is attached to the printed text only and is dropped on devices that do
    not support colors.
    """

    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        """
        Initialize the reporter.

        Args:
            console (Console | None): Console for the results. Standard output if not provided.
            err_console (Console | None): Console for errors. Standard error if not provided.
        """
        self._console = console or Console()
        self._err_console = err_console or Console(stderr=True)

    def report(self, job: JobHandle, mode: OutputFormat) -> None:
        """
        Print the submitted job using the output format.

        With `OutputFormat.FRIENDLY_URI`, jobs that do not provide a status
        page are printed as with `OutputFormat.ID`.

        Args:
            job (JobHandle): The submitted job.
            mode (OutputFormat): The output format.

        Raises:
            ValueError: If the output format is invalid.
        """
        match mode:
            case OutputFormat.FRIENDLY_URI if job.uri:
                self._print(f"Job '{job.id}' was submitted to '{job.target}'.")
                self._print("To check the status and see the results of the job, open:")
                self._console.print(
                    Text(job.uri, style=CFG.reporter.link_style), soft_wrap=True
                )
            case OutputFormat.FRIENDLY_URI | OutputFormat.ID:
                self._print(job.id)
            case _:
                raise ValueError(f"Invalid output format '{mode}'.")

    def reportValidation(self, outcome: ValidationOutcome) -> None:
        """
        Print the result of a dry run followed by its diagnostic message, if any.
        """
        self._print(
            CFG.reporter.valid_banner
            if outcome.is_valid
            else CFG.reporter.invalid_banner
        )
        if outcome.hasMessage():
            self._print(outcome.message)  # ty: ignore[invalid-argument-type]

    def reportUnknownTarget(self, target: str | None) -> None:
        """
        Print an error for attempting to use an unknown target.

        Args:
            target (str | None): The unrecognized target. None if no target was specified.
        """
        message = (
            f"The target '{target}' was not recognized."
            if target
            else "No target was specified."
        )
        self._err_console.print(
            Text(message, style=CFG.reporter.error_style), soft_wrap=True
        )

    def _print(self, text: str) -> None:
        self._console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )
