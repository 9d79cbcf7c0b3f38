# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Execution on targets of a remote workspace.

`RemoteBackend` implements validation and submission over the workspace
REST API using `RemoteClient`. Provider-specific subclasses declare the data
formats and limits of their targets and register themselves in `BackendMeta`.
"""

from .backend import RemoteBackend
from .client import RemoteClient
from .providers import IonQBackend, QuantinuumBackend, RigettiBackend

__all__ = [
    "IonQBackend",
    "QuantinuumBackend",
    "RemoteBackend",
    "RemoteClient",
    "RigettiBackend",
]
