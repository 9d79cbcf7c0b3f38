# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for qsd.

This module collects the foundational pieces used across the qsd codebase:
configuration, error types, structured logging, and help formatting for
the command-line interface.
"""
