# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Value types describing a qsd submission.

This package defines `SubmissionSettings`, the immutable set of options
controlling a submission, `OutputFormat`, selecting what is printed once a job
is submitted, and `Workspace` together with the credentials used to reach it.
"""

from .output_format import OutputFormat
from .settings import SubmissionSettings
from .workspace import AmbientCredential, Credential, TokenCredential, Workspace

__all__ = [
    "AmbientCredential",
    "Credential",
    "OutputFormat",
    "SubmissionSettings",
    "TokenCredential",
    "Workspace",
]
