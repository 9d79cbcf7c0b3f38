# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from qsd_lib.core.config import CFG
from qsd_lib.core.error import QSDError
from qsd_lib.properties.workspace import AmbientCredential, TokenCredential, Workspace


def _workspace(**kwargs) -> Workspace:
    return Workspace("sub", "rg", "ws", TokenCredential("token"), **kwargs)


def test_token_credential_returns_token():
    assert TokenCredential("abc").getToken() == "abc"


def test_token_credential_repr_hides_token():
    assert "abc" not in repr(TokenCredential("abc"))


def test_ambient_credential_reads_environment(monkeypatch):
    monkeypatch.setenv(CFG.env_vars.access_token, "from-env")
    assert AmbientCredential().getToken() == "from-env"


def test_ambient_credential_custom_variable(monkeypatch):
    monkeypatch.setenv("MY_TOKEN", "custom")
    assert AmbientCredential("MY_TOKEN").getToken() == "custom"


def test_ambient_credential_missing_token_raises(monkeypatch):
    monkeypatch.delenv(CFG.env_vars.access_token, raising=False)

    with pytest.raises(QSDError, match="No access token available"):
        AmbientCredential().getToken()


def test_workspace_default_base_uri():
    assert _workspace().base_uri == CFG.remote.default_base_uri


def test_workspace_api_uri():
    workspace = _workspace(base_uri="https://example.com/")

    assert workspace.apiUri == (
        f"https://example.com/{CFG.remote.api_version}/subscriptions/sub"
        "/resourceGroups/rg/providers/Microsoft.Quantum/workspaces/ws"
    )


def test_workspace_job_uri():
    workspace = _workspace(base_uri="https://example.com")
    assert workspace.jobUri("job-1") == f"{workspace.apiUri}/jobs/job-1"


def test_workspace_portal_uri_contains_identifiers():
    uri = _workspace().portalUri("job-1")

    assert "subscriptions/sub" in uri
    assert "resourceGroups/rg" in uri
    assert "Workspaces/ws" in uri
    assert uri.endswith("job-1")
