from __future__ import annotations

from typing import Generic, Optional, TypeVar

from ..core.facade import Facade
from .notifier import Notifier

DataT = TypeVar("DataT")


class Proxy(Notifier, Generic[DataT]):
    """Named holder for one data resource, registered in the Model."""

    NAME = "Proxy"

    def __init__(
        self,
        proxy_name: Optional[str] = None,
        data: Optional[DataT] = None,
        *,
        facade: Optional[Facade] = None,
    ) -> None:
        super().__init__(facade=facade)
        self._proxy_name = proxy_name if proxy_name is not None else self.NAME
        self._data: Optional[DataT] = None
        if data is not None:
            self.data = data

    @property
    def proxy_name(self) -> str:
        return self._proxy_name

    @property
    def data(self) -> Optional[DataT]:
        return self._data

    @data.setter
    def data(self, value: Optional[DataT]) -> None:
        self._data = value

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._proxy_name!r})"


__all__ = ["Proxy"]
