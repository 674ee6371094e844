"""
Built-in delivery platforms for Beacon.

Imports every platform module so their ``register_platform`` decorators
run, and re-exports the Platform classes each module lists in __all__.
"""

import importlib
import inspect
import pkgutil

from beacon.core import Platform
from beacon.logging_config import get_logger

logger = get_logger(__name__)

__all__ = []

for module_info in pkgutil.iter_modules(__path__):
    module = importlib.import_module(f"{__name__}.{module_info.name}")

    for name in getattr(module, "__all__", ()):
        if name in __all__:
            logger.warning(
                "Duplicate platform class '%s' in module '%s' - skipping",
                name,
                module_info.name
            )
            continue

        cls = getattr(module, name)
        if not (inspect.isclass(cls) and issubclass(cls, Platform)):
            logger.warning(
                "Export '%s' in module '%s' is not a Platform class - skipping",
                name,
                module_info.name
            )
            continue

        globals()[name] = cls
        __all__.append(name)
