# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Programs submitted by qsd.

`EntryPoint` is the capability qsd needs from a compiled program: information
about it and the binding of command-line arguments to its input.
`FileEntryPoint` implements it for programs stored in files.
"""

from .entry_point import EntryPoint, EntryPointInfo, FileEntryPoint

__all__ = ["EntryPoint", "EntryPointInfo", "FileEntryPoint"]
