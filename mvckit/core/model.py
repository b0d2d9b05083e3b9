from __future__ import annotations

import logging
from typing import Dict, Optional

from ..domain.errors import SingletonError
from ..domain.ports import ProxyPort


class Model:
    """Process-wide registry of proxies keyed by ``proxy_name``."""

    SINGLETON_MSG = "Model singleton already constructed!"
    _instance: Optional["Model"] = None

    @classmethod
    def get_instance(cls) -> "Model":
        if Model._instance is None:
            cls()
        return Model._instance  # type: ignore[return-value]

    @classmethod
    def reset_instance(cls) -> None:
        Model._instance = None

    def __init__(self) -> None:
        if Model._instance is not None:
            raise SingletonError(self.SINGLETON_MSG)
        Model._instance = self
        self._log = logging.getLogger(__name__)
        self.proxy_map: Dict[str, ProxyPort] = {}
        self.initialize_model()

    def initialize_model(self) -> None:
        """Hook for subclasses; runs once at the end of construction."""

    def register_proxy(self, proxy: ProxyPort) -> None:
        """Store ``proxy``, replacing any proxy of the same name, then call ``on_register``."""
        name = proxy.proxy_name
        if name in self.proxy_map:
            self._log.debug("Replacing proxy '%s'", name)
        self.proxy_map[name] = proxy
        proxy.on_register()

    def retrieve_proxy(self, name: str) -> Optional[ProxyPort]:
        return self.proxy_map.get(name)

    def remove_proxy(self, name: str) -> Optional[ProxyPort]:
        proxy = self.proxy_map.pop(name, None)
        if proxy is None:
            return None
        self._log.debug("Removed proxy '%s'", name)
        proxy.on_remove()
        return proxy

    def has_proxy(self, name: str) -> bool:
        return name in self.proxy_map


__all__ = ["Model"]
