# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from .backend import NothingBackend

__all__ = ["NothingBackend"]
