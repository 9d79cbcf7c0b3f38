# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for integrating qsd with execution backends.

- `ExecutionBackend`: the capability interface every backend implements,
  offering asynchronous `validate` and `submit` operations.

- `JobHandle` and `ValidationOutcome`: results of submission and validation.

- `BackendMeta`: a metaclass that registers backend implementations under
  the provider names they serve and looks them up by target identifier.
"""

from .interface import ExecutionBackend
from .job import JobHandle
from .meta import BackendMeta
from .outcome import ValidationOutcome

__all__ = ["BackendMeta", "ExecutionBackend", "JobHandle", "ValidationOutcome"]
