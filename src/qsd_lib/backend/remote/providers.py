# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Remote backends of the supported providers.
"""

from qsd_lib.backend.interface import BackendMeta

from .backend import RemoteBackend


class IonQBackend(RemoteBackend):
    """Targets provided by IonQ."""

    INPUT_DATA_FORMAT = "qir.v1"
    OUTPUT_DATA_FORMAT = "microsoft.quantum-results.v1"

    @staticmethod
    def providers() -> list[str]:
        return ["ionq"]


class QuantinuumBackend(RemoteBackend):
    """Targets provided by Quantinuum (formerly Honeywell)."""

    INPUT_DATA_FORMAT = "qir.v1"
    OUTPUT_DATA_FORMAT = "microsoft.quantum-results.v1"

    @staticmethod
    def providers() -> list[str]:
        return ["quantinuum", "honeywell"]


class RigettiBackend(RemoteBackend):
    """Targets provided by Rigetti."""

    INPUT_DATA_FORMAT = "qir.v1"
    OUTPUT_DATA_FORMAT = "microsoft.quantum-results.v2"
    MAX_SHOTS = 100000

    @staticmethod
    def providers() -> list[str]:
        return ["rigetti"]


BackendMeta.register(IonQBackend)
BackendMeta.register(QuantinuumBackend)
BackendMeta.register(RigettiBackend)
