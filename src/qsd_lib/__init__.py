# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the qsd command-line tool.

This package provides the logic behind qsd's submission workflow: the
submission settings and workspace context, the execution backend abstraction
with its no-op and remote implementations, target resolution, and the driver
that validates or submits a program and reports the outcome.
"""

from .qsd import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "backend",
    "core",
    "program",
    "properties",
    "submit",
]
