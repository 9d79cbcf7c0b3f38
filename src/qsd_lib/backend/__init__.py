# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Execution backends available to qsd.

Importing this package registers all remote providers in `BackendMeta`.
"""

from .interface import BackendMeta, ExecutionBackend, JobHandle, ValidationOutcome
from .nothing import NothingBackend
from .remote import RemoteBackend

__all__ = [
    "BackendMeta",
    "ExecutionBackend",
    "JobHandle",
    "NothingBackend",
    "RemoteBackend",
    "ValidationOutcome",
]
