# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field

from qsd_lib.core.config import CFG
from qsd_lib.core.error import QSDError

from .output_format import OutputFormat
from .workspace import AmbientCredential, Credential, TokenCredential, Workspace


@dataclass(frozen=True)
class SubmissionSettings:
    """
    Settings for a submission to a remote workspace.
    """

    # The target device ID.
    target: str | None = None
    # The storage account connection string.
    storage: str | None = field(default=None, repr=False)
    # The subscription ID.
    subscription: str | None = None
    # The resource group name.
    resource_group: str | None = None
    # The workspace name.
    workspace: str | None = None
    # The authentication token.
    aad_token: str | None = field(default=None, repr=False)
    # The base URI of the remote endpoint.
    base_uri: str | None = None
    # The number of times the program is executed on the target machine.
    shots: int = CFG.targets.default_shots
    # The information to show in the output after the job is submitted.
    output: OutputFormat = OutputFormat.FRIENDLY_URI
    # Validate the program and options, but do not submit.
    dry_run: bool = False

    def __post_init__(self):
        if self.shots < 0:
            raise QSDError(
                f"The number of shots must not be negative, got '{self.shots}'."
            )

    def createWorkspace(self) -> Workspace:
        """
        Create a `Workspace` based on the settings.

        An explicitly provided token is used if available; otherwise the workspace
        authenticates with the ambient credential of the process.

        Returns:
            Workspace: The workspace based on the settings.

        Raises:
            QSDError: If the subscription, resource group, or workspace name is missing.
        """
        missing = [
            option
            for option, value in (
                ("--subscription", self.subscription),
                ("--resource-group", self.resource_group),
                ("--workspace", self.workspace),
            )
            if not value
        ]
        if missing:
            raise QSDError(
                f"Could not connect to a workspace. Missing options: {', '.join(missing)}."
            )

        credential: Credential = (
            AmbientCredential()
            if self.aad_token is None
            else TokenCredential(self.aad_token)
        )

        return Workspace(
            self.subscription,  # ty: ignore[invalid-argument-type]
            self.resource_group,  # ty: ignore[invalid-argument-type]
            self.workspace,  # ty: ignore[invalid-argument-type]
            credential,
            base_uri=self.base_uri or CFG.remote.default_base_uri,
        )
