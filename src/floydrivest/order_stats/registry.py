"""Registry for quantile interpolation methods.

Uses a decorator pattern for registration, enabling both built-in and
third-party methods to register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from floydrivest.order_stats.base import QuantileMethod


class QuantileMethodRegistry:
    """Registry mapping string names to QuantileMethod classes.

    Built-in methods register via the ``@QuantileMethodRegistry.register()``
    decorator. The ``build()`` class method instantiates the method named by
    the config's ``quantile_method`` field.
    """

    _registry: ClassVar[dict[str, type[QuantileMethod]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[QuantileMethod]], type[QuantileMethod]]:
        """Decorator that registers a QuantileMethod class under *name*.

        Args:
            name: Identifier used in config ``quantile_method``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[QuantileMethod]) -> type[QuantileMethod]:
            if name in cls._registry:
                raise ValueError(f"Quantile method '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[QuantileMethod]:
        """Return the method class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown quantile method '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: Any) -> QuantileMethod:
        """Instantiate the method specified by *config.quantile_method*.

        Args:
            config: A FloydRivestConfig (or compatible object) with a
                ``quantile_method`` attribute.
        """
        klass = cls.get(config.quantile_method)
        return klass()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered method names."""
        return sorted(cls._registry)
