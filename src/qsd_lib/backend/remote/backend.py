# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import asyncio
import base64
import uuid
from collections.abc import Callable
from typing import Any

from qsd_lib.backend.interface import (
    BackendMeta,
    ExecutionBackend,
    JobHandle,
    ValidationOutcome,
)
from qsd_lib.core.error import QSDError, QSDRemoteError
from qsd_lib.core.logger import get_logger
from qsd_lib.program import EntryPointInfo
from qsd_lib.properties import Workspace

from .client import RemoteClient

logger = get_logger(__name__)


class RemoteBackend(ExecutionBackend, metaclass=BackendMeta):
    """
    Backend executing programs on a target of a remote workspace.

    Concrete providers specify the data formats they accept and the maximal
    number of shots. The blocking HTTP communication is performed outside
    the event loop.
    """

    # Format of the submitted program.
    INPUT_DATA_FORMAT: str = ""
    # Format of the job results.
    OUTPUT_DATA_FORMAT: str = ""
    # Maximal number of shots accepted by the provider's targets.
    MAX_SHOTS: int = 10000

    def __init__(
        self,
        workspace: Workspace,
        target: str,
        storage: str | None = None,
        shots: int = 1,
        client: RemoteClient | None = None,
    ):
        """
        Bind the backend to a target of a workspace.

        Args:
            workspace (Workspace): The workspace providing the target.
            target (str): Identifier of the target.
            storage (str | None): Connection string of a storage account to associate with the jobs.
            shots (int): Number of times the program is executed.
            client (RemoteClient | None): Client to use. If not provided, a client is
                created for the workspace and closed after every remote call.
        """
        self._workspace = workspace
        self._target = target
        # the workspace knows the provider under the name used in the target
        self._provider = target.split(".", 1)[0].lower()
        self._storage = storage
        self._shots = shots
        self._owns_client = client is None
        self._client = client or RemoteClient(workspace)

    @property
    def target(self) -> str:
        return self._target

    @property
    def provider(self) -> str:
        return self._provider

    async def validate(
        self, info: EntryPointInfo, input: dict[str, str]
    ) -> ValidationOutcome:
        if not info.payload:
            return ValidationOutcome(False, f"Program '{info.name}' is empty.")

        if self._shots < 1:
            return ValidationOutcome(
                False, "At least one shot is required to run the program."
            )

        if self._shots > self.MAX_SHOTS:
            return ValidationOutcome(
                False,
                f"Target '{self._target}' supports at most {self.MAX_SHOTS} shots, requested {self._shots}.",
            )

        status = await self._call(self._client.get, "/providerStatus")
        return self._checkAvailability(status)

    async def submit(self, info: EntryPointInfo, input: dict[str, str]) -> JobHandle:
        job_id = str(uuid.uuid4())
        body = self._buildJob(job_id, info, input)

        logger.debug(f"Submitting program '{info.name}' to '{self._target}' as job '{job_id}'.")
        response = await self._call(self._client.put, f"/jobs/{job_id}", body)

        job_id = str(response.get("id") or job_id)
        logger.debug(f"Job resource: {self._workspace.jobUri(job_id)}.")
        return JobHandle(job_id, self._target, uri=self._workspace.portalUri(job_id))

    async def _call(self, func: Callable[..., Any], *args: Any) -> dict[str, Any]:
        """
        Run a blocking client call outside the event loop.

        Closes the client afterwards if it was created by the backend.

        Raises:
            QSDRemoteError: If the call fails or the response is not a JSON object.
        """
        try:
            response = await asyncio.to_thread(func, *args)
        finally:
            if self._owns_client:
                self._client.close()

        if not isinstance(response, dict):
            raise QSDRemoteError(
                f"Unexpected response from workspace '{self._workspace.name}': expected a JSON object, got {type(response).__name__}."
            )

        return response

    def _checkAvailability(self, status: dict[str, Any]) -> ValidationOutcome:
        """
        Check that the target is offered by the workspace and currently available.

        Args:
            status (dict[str, Any]): Provider status reported by the workspace.

        Returns:
            ValidationOutcome: Invalid outcome with a diagnostic message if the target cannot be used.
        """
        providers = {p.get("id"): p for p in _entries(status, "value")}
        if not (provider := providers.get(self._provider)):
            return ValidationOutcome(
                False,
                f"Provider '{self._provider}' is not enabled in workspace '{self._workspace.name}'.",
            )

        targets = {t.get("id"): t for t in _entries(provider, "targets")}
        if not (target := targets.get(self._target)):
            return ValidationOutcome(
                False,
                f"Target '{self._target}' is not offered by provider '{self._provider}'.",
            )

        availability = str(target.get("currentAvailability") or "Unknown")
        if availability != "Available":
            return ValidationOutcome(
                False, f"Target '{self._target}' is currently {availability.lower()}."
            )

        return ValidationOutcome(True)

    def _buildJob(
        self, job_id: str, info: EntryPointInfo, input: dict[str, str]
    ) -> dict[str, Any]:
        """
        Construct the description of a job to submit.
        """
        job: dict[str, Any] = {
            "id": job_id,
            "name": info.name,
            "providerId": self._provider,
            "target": self._target,
            "inputDataFormat": self.INPUT_DATA_FORMAT,
            "outputDataFormat": self.OUTPUT_DATA_FORMAT,
            "inputParams": {
                "entryPoint": info.name,
                "shots": self._shots,
                "arguments": [
                    {"name": name, "value": value} for name, value in input.items()
                ],
            },
            "inputData": base64.b64encode(info.payload).decode("ascii"),
        }

        if self._storage:
            job["storageAccount"] = _storageAccountName(self._storage)

        return job


def _storageAccountName(connection_string: str) -> str:
    """
    Extract the account name from a storage connection string.

    Raises:
        QSDError: If the connection string does not contain an account name.
    """
    for part in connection_string.split(";"):
        key, sep, value = part.partition("=")
        if sep and key.strip().lower() == "accountname" and value.strip():
            return value.strip()

    raise QSDError("Could not find 'AccountName' in the storage connection string.")


def _entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """
    Return the JSON objects listed under `key`, skipping malformed entries.
    """
    entries = data.get(key)
    if not isinstance(entries, list):
        return []
    return [entry for entry in entries if isinstance(entry, dict)]
