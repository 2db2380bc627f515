"""
Routes File Loader.

This module loads a routes declaration file by path.

A routes file is a Python file exposing a module-level `routes`
callable that takes a router and declares routes on it.
"""

import importlib.util
import sys
from pathlib import Path
from typing import Any


class LoaderError(Exception):
    """Base exception for loader-related errors."""

    pass


def load_routes(routes_path: str | Path, module_prefix: str = "myplugin") -> Any:
    """
    Load a routes file and return its `routes` attribute.

    Args:
        routes_path: Path to the routes file
        module_prefix: Prefix of the temporary module name

    Returns:
        The `routes` attribute, or None if the file does not define one

    Raises:
        LoaderError: If the file is missing or fails to import
    """
    routes_path = Path(routes_path)

    # Check if routes file exists
    if not routes_path.is_file():
        raise LoaderError(f"Routes file not found: {routes_path}")

    module_name = f"{module_prefix}_routes_{routes_path.stem}"
    previous = sys.modules.get(module_name)

    try:
        spec = importlib.util.spec_from_file_location(module_name, routes_path)

        if spec is None or spec.loader is None:
            raise LoaderError(f"Failed to create module spec for {routes_path}")

        module = importlib.util.module_from_spec(spec)

        # Add to sys.modules before execution
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        return getattr(module, "routes", None)

    except LoaderError:
        raise
    except Exception as e:
        raise LoaderError(f"Failed to load routes file {routes_path}: {e}") from e
    finally:
        # Routes files are read once; leave sys.modules as it was
        if previous is None:
            sys.modules.pop(module_name, None)
        else:
            sys.modules[module_name] = previous
