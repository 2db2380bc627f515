"""
Core plugin identity.

Exports the PluginContext value object and its errors.
"""

from myplugin.core.context import (
    ConfigurationError,
    ContextError,
    MissingConfigurationError,
    PluginContext,
)

__all__ = [
    "ConfigurationError",
    "ContextError",
    "MissingConfigurationError",
    "PluginContext",
]
