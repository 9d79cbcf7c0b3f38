# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABCMeta

from qsd_lib.core.logger import get_logger

from .interface import ExecutionBackend

logger = get_logger(__name__)


class BackendMeta(ABCMeta):
    """
    Metaclass for execution backend classes.
    """

    # registry of supported providers
    _registry: dict[str, type[ExecutionBackend]] = {}

    @classmethod
    def register(cls, backend_cls: type[ExecutionBackend]):
        """
        Register a backend class for all providers it serves.

        Args:
            backend_cls: Subclass of ExecutionBackend to register.
        """
        for provider in backend_cls.providers():
            cls._registry[provider.lower()] = backend_cls

    @classmethod
    def fromTarget(mcs, target: str | None) -> type[ExecutionBackend] | None:
        """
        Return the backend class serving the given target.

        Args:
            target (str | None): Identifier of the target, e.g. 'ionq.simulator'.

        Returns:
            type[ExecutionBackend] | None: The backend class or None if no
            registered backend serves the target.
        """
        if not target:
            return None

        provider = target.split(".", 1)[0].lower()
        backend_cls = mcs._registry.get(provider)
        logger.debug(
            f"Provider '{provider}' of target '{target}' maps to backend: {backend_cls}."
        )
        return backend_cls

    @classmethod
    def providers(mcs) -> list[str]:
        """
        Return the names of all registered providers.
        """
        return sorted(mcs._registry)
