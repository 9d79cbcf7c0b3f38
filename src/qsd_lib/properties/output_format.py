# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Enumeration of the supported output formats.

This module defines `OutputFormat`, selecting what qsd prints after a job
has been submitted.
"""

from enum import Enum
from typing import Self

from qsd_lib.core.error import QSDError


class OutputFormat(Enum):
    """
    The information to show in the output after the job is submitted.
    """

    # Show a friendly message with a URI that can be used to see the job results.
    FRIENDLY_URI = 1
    # Show only the job ID.
    ID = 2

    def __str__(self):
        return self.name.lower().replace("_", "-")

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding OutputFormat enum variant.

        Args:
            s (str): String representation of the output format (case-insensitive).
                Words may be separated by '-', '_', or nothing at all.

        Returns:
            OutputFormat variant.

        Raises:
            QSDError if the string corresponds to no OutputFormat.
        """
        normalized = s.strip().upper().replace("-", "_")
        for variant in cls:
            if normalized in (variant.name, variant.name.replace("_", "")):
                return variant

        raise QSDError(f"Could not recognize an output format '{s}'.")

    @classmethod
    def choices(cls) -> list[str]:
        """Return the CLI spelling of all output formats."""
        return [str(variant) for variant in cls]
