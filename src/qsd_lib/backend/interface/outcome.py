# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from typing import NamedTuple


class ValidationOutcome(NamedTuple):
    """
    Result of validating a program against an execution backend.

    Can be unpacked as `is_valid, message = outcome`.
    """

    # Whether the program can be run on the backend.
    is_valid: bool
    # Optional diagnostic message.
    message: str | None = None

    def hasMessage(self) -> bool:
        """Return True if the outcome carries a non-blank message."""
        return bool(self.message and self.message.strip())
