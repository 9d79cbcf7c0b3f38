# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Identity and connection context used to reach a remote workspace.

A `Workspace` bundles the subscription, resource group, workspace name, base
endpoint URI, and a credential. Two credential kinds exist: `TokenCredential`
wraps an explicitly provided token, while `AmbientCredential` picks up a token
from the environment only once it is actually needed.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from qsd_lib.core.config import CFG
from qsd_lib.core.error import QSDError
from qsd_lib.core.logger import get_logger

logger = get_logger(__name__)


class Credential(ABC):
    """
    Source of an access token for the remote workspace.
    """

    @abstractmethod
    def getToken(self) -> str:
        """
        Return the access token.

        Raises:
            QSDError: If no token can be obtained.
        """
        pass


@dataclass(frozen=True)
class TokenCredential(Credential):
    """Credential wrapping an explicitly provided token."""

    token: str = field(repr=False)

    def getToken(self) -> str:
        return self.token


@dataclass(frozen=True)
class AmbientCredential(Credential):
    """
    Credential obtained from the environment of the process.

    The token is read from the environment variable `env_var` when first requested.
    """

    env_var: str = CFG.env_vars.access_token

    def getToken(self) -> str:
        if not (token := os.environ.get(self.env_var)):
            raise QSDError(
                f"No access token available. Provide one using '--aad-token' or set the environment variable '{self.env_var}'."
            )

        logger.debug(f"Using access token from '{self.env_var}'.")
        return token


@dataclass(frozen=True)
class Workspace:
    """
    Remote workspace the jobs are submitted to.
    """

    subscription: str
    resource_group: str
    name: str
    credential: Credential
    base_uri: str = CFG.remote.default_base_uri

    @property
    def apiUri(self) -> str:
        """Root of the workspace REST resources."""
        return (
            f"{self.base_uri.rstrip('/')}/{CFG.remote.api_version}"
            f"/subscriptions/{self.subscription}"
            f"/resourceGroups/{self.resource_group}"
            f"/providers/Microsoft.Quantum/workspaces/{self.name}"
        )

    def jobUri(self, job_id: str) -> str:
        """
        Get the REST resource URI of a job.

        Args:
            job_id (str): Identifier of the job.

        Returns:
            str: URI of the job resource.
        """
        return f"{self.apiUri}/jobs/{job_id}"

    def portalUri(self, job_id: str) -> str:
        """
        Get a human-friendly URI of a page showing the status and results of a job.

        Args:
            job_id (str): Identifier of the job.

        Returns:
            str: URI of the job status page.
        """
        return CFG.remote.portal_uri_template.format(
            subscription=self.subscription,
            resource_group=self.resource_group,
            workspace=self.name,
            job_id=job_id,
        )
