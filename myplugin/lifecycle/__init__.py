"""
Plugin Lifecycle - activation, deactivation and uninstall.

This module handles:
- Platform requirement checks
- Activation (rewrite rules, default options)
- Deactivation (scheduled task cleanup)
- Uninstall (removal of all plugin data)
"""

from myplugin.lifecycle.activator import activate
from myplugin.lifecycle.deactivator import deactivate
from myplugin.lifecycle.errors import LifecycleError, RequirementsError, UninstallError
from myplugin.lifecycle.requirements import Requirements, check_requirements_on_init
from myplugin.lifecycle.uninstaller import UninstallReport, uninstall

__all__ = [
    "LifecycleError",
    "Requirements",
    "RequirementsError",
    "UninstallError",
    "UninstallReport",
    "activate",
    "check_requirements_on_init",
    "deactivate",
    "uninstall",
]
