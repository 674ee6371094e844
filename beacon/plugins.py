"""
Built-in platform loading for Beacon.

Importing this module registers every built-in platform with the default
registry.
"""

# Import the platforms package to trigger registration decorators
# pylint: disable=unused-import
# ruff: noqa: F401
from beacon import platforms
from beacon.registry import get_registry, register_platform

__all__ = [
    "get_registry",
    "register_platform",
]
