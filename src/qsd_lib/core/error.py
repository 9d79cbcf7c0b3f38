# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout qsd.

`QSDError` is raised for recoverable, user-facing problems such as incomplete
workspace settings or malformed program arguments. `QSDRemoteError` signals a
failure while communicating with the remote workspace. Each exception carries
an exit code used by the qsd commands to report failures consistently.

An unknown target or an invalid program are not errors: they are regular
outcomes reported by the submission driver.
"""

from .config import CFG


class QSDError(Exception):
    """Common exception type for all recoverable qsd errors."""

    exit_code = CFG.exit_codes.default


class QSDRemoteError(QSDError):
    """Raised when communication with the remote workspace fails."""

    pass
