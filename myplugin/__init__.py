"""
My Plugin - plugin scaffold built around a single identity object.

This is the main package that exports the public API.
"""

__version__ = "1.0.0"

from myplugin.core.context import MissingConfigurationError, PluginContext  # noqa: E402
from myplugin.host import Host  # noqa: E402

__all__ = [
    "__version__",
    "Host",
    "MissingConfigurationError",
    "PluginContext",
]
