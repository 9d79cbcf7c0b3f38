# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from qsd_lib.core.error import QSDError
from qsd_lib.core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EntryPointInfo:
    """
    Information about a compiled program passed to execution backends.
    """

    # Name of the entry point.
    name: str
    # Path to the compiled program.
    path: Path
    # Content of the compiled program.
    payload: bytes = field(repr=False)


class EntryPoint(ABC):
    """
    Abstract base class for programs that can be submitted by qsd.

    Execution backends treat the program as opaque: they only consume its
    `info` and the input produced by `createArgument`.
    """

    @property
    @abstractmethod
    def info(self) -> EntryPointInfo:
        """Information about the program."""
        pass

    @abstractmethod
    def createArgument(self, arguments: Iterable[str]) -> dict[str, str]:
        """
        Convert command-line arguments into the input of the program.

        Args:
            arguments (Iterable[str]): Program arguments as provided on the command line.

        Returns:
            dict[str, str]: Input of the program understood by execution backends.

        Raises:
            QSDError: If the arguments cannot be bound to the program.
        """
        pass


class FileEntryPoint(EntryPoint):
    """
    Compiled program stored in a file.

    Arguments are bound from `NAME=VALUE` pairs.
    """

    def __init__(self, path: Path, payload: bytes):
        self._info = EntryPointInfo(path.stem, path, payload)

    @classmethod
    def fromFile(cls, path: Path) -> Self:
        """
        Load a compiled program from a file.

        Args:
            path (Path): Path to the compiled program.

        Returns:
            FileEntryPoint: The loaded program.

        Raises:
            QSDError: If the file does not exist or cannot be read.
        """
        if not path.is_file():
            raise QSDError(f"Program '{path}' does not exist or is not a file.")

        try:
            payload = path.read_bytes()
        except OSError as e:
            raise QSDError(f"Could not read program '{path}': {e}.") from e

        logger.debug(f"Loaded program '{path}' ({len(payload)} bytes).")
        return cls(path, payload)

    @property
    def info(self) -> EntryPointInfo:
        return self._info

    def createArgument(self, arguments: Iterable[str]) -> dict[str, str]:
        bound: dict[str, str] = {}
        for argument in arguments:
            name, sep, value = argument.partition("=")
            if not sep or not (name := name.strip()):
                raise QSDError(
                    f"Could not parse program argument '{argument}'. Expected format is 'NAME=VALUE'."
                )
            if name in bound:
                raise QSDError(f"Program argument '{name}' specified multiple times.")
            bound[name] = value

        return bound
