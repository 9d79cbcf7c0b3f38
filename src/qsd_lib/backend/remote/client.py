# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
HTTP client for the remote workspace.

`RemoteClient` wraps a `requests.Session` carrying the workspace credentials
and a retry policy for transient failures. All failures are reported as
`QSDRemoteError`.
"""

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from qsd_lib.core.config import CFG
from qsd_lib.core.error import QSDRemoteError
from qsd_lib.core.logger import get_logger
from qsd_lib.properties import Workspace

logger = get_logger(__name__)


class RemoteClient:
    """
    Authenticated HTTP client bound to a single workspace.
    """

    def __init__(self, workspace: Workspace):
        """
        Initialize the client for a workspace.

        The access token is only requested from the workspace credential
        once the first request is made.

        Args:
            workspace (Workspace): The workspace to communicate with.
        """
        self._workspace = workspace
        self._session: requests.Session | None = None

    @property
    def session(self) -> requests.Session:
        """HTTP session with authentication headers and a retry adapter."""
        if self._session is None:
            self._session = self._createSession()
        return self._session

    def _createSession(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(
            {
                "Authorization": f"Bearer {self._workspace.credential.getToken()}",
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": CFG.remote.user_agent,
            }
        )

        retry_strategy = Retry(
            total=CFG.remote.retry_attempts,
            backoff_factor=CFG.remote.retry_backoff,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "PUT"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def get(self, path: str) -> dict[str, Any]:
        """
        Send a GET request to a workspace resource and return the decoded JSON body.

        Args:
            path (str): Path relative to the workspace API root, e.g. '/providerStatus'.

        Raises:
            QSDRemoteError: If the request fails or the response is not a JSON object.
        """
        return self._decode(self._request("GET", path), f"GET {path}")

    def put(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Send a PUT request with a JSON body to a workspace resource and return the decoded JSON body.

        Args:
            path (str): Path relative to the workspace API root, e.g. '/jobs/<id>'.
            body (dict[str, Any]): JSON body of the request.

        Raises:
            QSDRemoteError: If the request fails or the response is not a JSON object.
        """
        return self._decode(self._request("PUT", path, json=body), f"PUT {path}")

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RemoteClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> requests.Response:
        url = f"{self._workspace.apiUri}{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                timeout=CFG.remote.timeout,
                verify=CFG.remote.verify_ssl,
            )
        except requests.exceptions.Timeout as e:
            raise QSDRemoteError(
                f"Request timed out after {CFG.remote.timeout} seconds: {method} {url}."
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise QSDRemoteError(
                f"Could not connect to '{self._workspace.base_uri}': {e}."
            ) from e
        except requests.exceptions.RequestException as e:
            raise QSDRemoteError(f"Request failed: {method} {url}: {e}.") from e

        logger.debug(f"{method} {url} -> {response.status_code}.")
        return response

    @staticmethod
    def _decode(response: requests.Response, context: str) -> dict[str, Any]:
        if not response.ok:
            try:
                detail = response.json().get("error", {}).get("message", response.text)
            except (ValueError, AttributeError):
                detail = response.text

            match response.status_code:
                case 401 | 403:
                    raise QSDRemoteError(f"Authentication failed ({context}): {detail}")
                case 404:
                    raise QSDRemoteError(f"Resource not found ({context}): {detail}")
                case status:
                    raise QSDRemoteError(
                        f"Remote workspace returned an error {status} ({context}): {detail}"
                    )

        if not response.content:
            return {}

        try:
            data = response.json()
        except ValueError as e:
            raise QSDRemoteError(f"Could not decode response ({context}): {e}.") from e

        if not isinstance(data, dict):
            raise QSDRemoteError(
                f"Unexpected response ({context}): expected a JSON object, got {type(data).__name__}."
            )

        return data
