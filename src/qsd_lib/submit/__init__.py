# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Utilities for submitting programs to execution backends.

`TargetResolver` maps the target named in `SubmissionSettings` to an
`ExecutionBackend`, or to `NotFound` if no backend serves it.

`SubmissionDriver` resolves the backend, binds the program arguments, and
either validates the program (dry run) or submits it, returning the exit code
of the operation.

`ResultReporter` prints the validation verdict, the submitted job in the
selected output format, or the unknown-target error.
"""

from .driver import SubmissionDriver
from .reporter import ResultReporter
from .resolver import NotFound, TargetResolver

__all__ = ["NotFound", "ResultReporter", "SubmissionDriver", "TargetResolver"]
