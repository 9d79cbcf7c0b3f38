# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC, abstractmethod

from qsd_lib.program import EntryPointInfo

from .job import JobHandle
from .outcome import ValidationOutcome


class ExecutionBackend(ABC):
    """
    Abstract base class for execution backends.

    A backend is bound to a single target when constructed and is not
    modified afterwards. Both operations may suspend while communicating
    with a remote service; no timeout is enforced by the caller and
    cancellation is not supported.
    """

    @staticmethod
    def providers() -> list[str]:
        """
        Return the names of the providers served by this backend.

        A target is served by the backend if the part of its identifier
        preceding the first '.' matches one of the provider names.

        Returns:
            list[str]: Provider names.
        """
        raise NotImplementedError(
            "providers method is not implemented for this backend implementation"
        )

    @abstractmethod
    async def validate(
        self, info: EntryPointInfo, input: dict[str, str]
    ) -> ValidationOutcome:
        """
        Check whether the program with the given input can run on the target.

        Args:
            info (EntryPointInfo): Information about the program.
            input (dict[str, str]): Input of the program.

        Returns:
            ValidationOutcome: Validity of the program and an optional diagnostic message.
        """
        pass

    @abstractmethod
    async def submit(self, info: EntryPointInfo, input: dict[str, str]) -> JobHandle:
        """
        Submit the program with the given input for execution on the target.

        Args:
            info (EntryPointInfo): Information about the program.
            input (dict[str, str]): Input of the program.

        Returns:
            JobHandle: Handle of the submitted job.

        Raises:
            QSDError: If the submission fails.
        """
        pass
