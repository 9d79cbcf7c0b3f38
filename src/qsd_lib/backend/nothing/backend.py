# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from qsd_lib.backend.interface import ExecutionBackend, JobHandle, ValidationOutcome
from qsd_lib.core.config import CFG
from qsd_lib.core.logger import get_logger
from qsd_lib.program import EntryPointInfo

logger = get_logger(__name__)


class NothingBackend(ExecutionBackend):
    """
    Backend that does nothing.

    Every program is valid and every submission immediately returns a job
    with a synthetic identifier. No external service is contacted.
    """

    JOB_ID = "00000000-0000-0000-0000-000000000000"

    async def validate(
        self, info: EntryPointInfo, input: dict[str, str]
    ) -> ValidationOutcome:
        logger.debug(f"Program '{info.name}' is always valid on the nothing target.")
        return ValidationOutcome(True)

    async def submit(self, info: EntryPointInfo, input: dict[str, str]) -> JobHandle:
        logger.debug(f"Pretending to submit program '{info.name}'.")
        return JobHandle(NothingBackend.JOB_ID, CFG.targets.nothing)
