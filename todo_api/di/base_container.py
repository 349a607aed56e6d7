# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal service registry.

    Keys are usually classes (domain interfaces, use cases) but plain strings
    are used for infrastructure handles such as collections. Singletons are
    stored as instances; factories are called on every get().
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a ready-made instance under key"""
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory producing a new instance per get()"""
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No registration found for {name}")
