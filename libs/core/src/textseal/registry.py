
from __future__ import annotations
from typing import Any, Callable, Dict, Tuple

from .errors import UnsupportedFormatError
from .formats import Capability, TextFormat

class _Registry:
    def __init__(self) -> None:
        self._items: Dict[Tuple[TextFormat, Capability], Any] = {}

    def register(self, fmt: TextFormat, *capabilities: Capability) -> Callable[[Any], Any]:
        def _inner(cls_or_obj: Any) -> Any:
            for capability in capabilities:
                if not fmt.supports(capability):
                    raise ValueError(f"{fmt} does not offer {capability.value}")
                self._items[(fmt, capability)] = cls_or_obj
            return cls_or_obj
        return _inner

    def get(self, fmt: TextFormat, capability: Capability) -> Any:
        if not fmt.supports(capability):
            raise UnsupportedFormatError(f"format {fmt} does not support {capability.value}")
        try:
            return self._items[(fmt, capability)]
        except KeyError:
            raise UnsupportedFormatError(
                f"no backend registered for {fmt} {capability.value}; is the adapter installed?"
            ) from None

    def list(self) -> Dict[Tuple[TextFormat, Capability], Any]:
        return dict(self._items)

registry = _Registry()
