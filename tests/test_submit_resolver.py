# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from unittest.mock import patch

import pytest

from qsd_lib.backend import NothingBackend
from qsd_lib.backend.remote import IonQBackend, QuantinuumBackend
from qsd_lib.core.error import QSDError
from qsd_lib.properties import SubmissionSettings
from qsd_lib.submit import NotFound, TargetResolver


def test_resolve_nothing_target():
    assert isinstance(
        TargetResolver().resolve(SubmissionSettings(target="nothing")), NothingBackend
    )


def test_resolve_nothing_does_not_construct_workspace():
    with patch.object(SubmissionSettings, "createWorkspace") as mock_create:
        TargetResolver().resolve(SubmissionSettings(target="nothing"))

    mock_create.assert_not_called()


@pytest.mark.parametrize(
    "target", ["unregistered-hardware-x", "nothing.else", "Nothing", "microsoft.estimator"]
)
def test_resolve_unknown_target(target):
    result = TargetResolver().resolve(SubmissionSettings(target=target))

    assert result == NotFound(target)


def test_resolve_no_target():
    assert TargetResolver().resolve(SubmissionSettings()) == NotFound(None)


def test_resolve_unknown_target_does_not_construct_workspace():
    with patch.object(SubmissionSettings, "createWorkspace") as mock_create:
        TargetResolver().resolve(SubmissionSettings(target="unregistered-hardware-x"))

    mock_create.assert_not_called()


@pytest.mark.parametrize(
    "target,backend_cls",
    [
        ("ionq.simulator", IonQBackend),
        ("quantinuum.sim.h1-1e", QuantinuumBackend),
        ("honeywell.hqs-lt-s1", QuantinuumBackend),
    ],
)
def test_resolve_registered_target(target, backend_cls):
    settings = SubmissionSettings(
        target=target, subscription="sub", resource_group="rg", workspace="ws"
    )

    backend = TargetResolver().resolve(settings)

    assert isinstance(backend, backend_cls)
    assert backend.target == target


def test_resolve_registered_target_without_workspace_raises():
    with pytest.raises(QSDError, match="Missing options"):
        TargetResolver().resolve(SubmissionSettings(target="ionq.qpu"))
