"""
Platform registry for Beacon.

Maps platform names to delivery capabilities. Built-in platforms register
themselves in the default registry with the ``register_platform``
decorator; each dispatcher works on its own copy so custom platforms can
be added or built-ins replaced without affecting other dispatchers.
"""

from collections.abc import Callable, Iterator

from beacon.core import DeliverFn, FunctionPlatform, Platform


class PlatformRegistry:
    """
    Registry of delivery platforms by name.

    Names are unique; registering a name again replaces the earlier
    platform but keeps its position in iteration order.
    """

    def __init__(self) -> None:
        self._platforms: dict[str, Platform] = {}

    def register(self, name: str, platform: Platform | DeliverFn) -> None:
        """Register a platform instance or a plain delivery function."""
        if not isinstance(platform, Platform):
            if not callable(platform):
                raise TypeError(f"Platform '{name}' must be a Platform or a callable")
            platform = FunctionPlatform(platform)
        self._platforms[name] = platform

    def get(self, name: str) -> Platform:
        """Get a platform by name."""
        if name not in self._platforms:
            raise ValueError(f"Unknown platform: {name}")
        return self._platforms[name]

    def names(self) -> list[str]:
        """List registered platform names in registration order."""
        return list(self._platforms)

    def items(self) -> Iterator[tuple[str, Platform]]:
        # Snapshot so registrations during delivery don't break iteration
        return iter(list(self._platforms.items()))

    def copy(self) -> "PlatformRegistry":
        registry = PlatformRegistry()
        registry._platforms = dict(self._platforms)
        return registry

    def __contains__(self, name: object) -> bool:
        return name in self._platforms

    def __len__(self) -> int:
        return len(self._platforms)


# Global registry instance
_registry = PlatformRegistry()


def register_platform(name: str) -> Callable[[type[Platform]], type[Platform]]:
    """Decorator to register a built-in platform class in the default registry."""
    def decorator(cls: type[Platform]) -> type[Platform]:
        _registry.register(name, cls())
        return cls
    return decorator


def get_registry() -> PlatformRegistry:
    """Get the default platform registry."""
    return _registry
