# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from dataclasses import dataclass

from qsd_lib.backend import BackendMeta, ExecutionBackend, NothingBackend
from qsd_lib.core.config import CFG
from qsd_lib.core.logger import get_logger
from qsd_lib.properties import SubmissionSettings

logger = get_logger(__name__)


@dataclass(frozen=True)
class NotFound:
    """
    Result of resolving a target that no backend serves.
    """

    # The unrecognized target identifier. None if no target was specified.
    target: str | None


class TargetResolver:
    """
    Maps the target of the submission settings to an execution backend.
    """

    def resolve(self, settings: SubmissionSettings) -> ExecutionBackend | NotFound:
        """
        Create the backend serving the target of the settings.

        The `nothing` target resolves to a backend that contacts no external
        service, so no workspace is constructed for it. Any other target is
        looked up among the registered providers.

        Args:
            settings (SubmissionSettings): The submission settings.

        Returns:
            ExecutionBackend | NotFound: The backend bound to the target,
            or NotFound if no registered backend serves the target.

        Raises:
            QSDError: If the target is served by a backend but the workspace
                cannot be constructed from the settings.
        """
        if settings.target == CFG.targets.nothing:
            logger.debug("Using the nothing backend.")
            return NothingBackend()

        if not (Backend := BackendMeta.fromTarget(settings.target)):
            return NotFound(settings.target)

        logger.debug(f"Using backend '{Backend.__name__}' for '{settings.target}'.")
        return Backend(
            settings.createWorkspace(),  # ty: ignore[too-many-positional-arguments]
            settings.target,
            settings.storage,
            settings.shots,
        )
