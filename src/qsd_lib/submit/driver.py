# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from collections.abc import Iterable

from qsd_lib.core.config import CFG
from qsd_lib.core.logger import get_logger
from qsd_lib.program import EntryPoint
from qsd_lib.properties import SubmissionSettings

from .reporter import ResultReporter
from .resolver import NotFound, TargetResolver

logger = get_logger(__name__)


class SubmissionDriver:
    """
    Validates or submits a program to the target selected by the settings.
    """

    def __init__(
        self,
        resolver: TargetResolver | None = None,
        reporter: ResultReporter | None = None,
    ):
        self._resolver = resolver or TargetResolver()
        self._reporter = reporter or ResultReporter()

    async def run(
        self,
        entry_point: EntryPoint,
        arguments: Iterable[str],
        settings: SubmissionSettings,
    ) -> int:
        """
        Submit the program to its target, or only validate it in a dry run.

        An unknown target and an invalid program are reported and result
        in a non-zero exit code. Errors raised while submitting are not handled.

        Args:
            entry_point (EntryPoint): The program.
            arguments (Iterable[str]): The command-line arguments of the program.
            settings (SubmissionSettings): The submission settings.

        Returns:
            int: The exit code.
        """
        backend = self._resolver.resolve(settings)
        if isinstance(backend, NotFound):
            self._reporter.reportUnknownTarget(backend.target)
            return CFG.exit_codes.failure

        input = entry_point.createArgument(arguments)
        if settings.dry_run:
            outcome = await backend.validate(entry_point.info, input)
            self._reporter.reportValidation(outcome)
            return 0 if outcome.is_valid else CFG.exit_codes.failure

        # shots are bound to the backend when it is resolved
        job = await backend.submit(entry_point.info, input)
        logger.debug(f"Job '{job.id}' submitted to '{job.target}'.")
        self._reporter.report(job, settings.output)
        return 0
