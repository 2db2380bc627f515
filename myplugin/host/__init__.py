"""
Host Integration - ports to the environment the plugin runs inside.

This module handles:
- Host port interfaces (options, database, scheduler, rewrites, environment)
- The action hook registry
- The Host bundle handed to every collaborator
"""

from dataclasses import dataclass, field

from myplugin.host.hooks import HookRegistry
from myplugin.host.ports import (
    Database,
    Environment,
    HostError,
    OptionStore,
    RewriteRules,
    Scheduler,
    Table,
    esc_like,
)


@dataclass
class Host:
    """
    Everything the plugin needs from its host.

    Attributes:
        options: Persisted options
        database: Host-managed tables
        scheduler: Scheduled task registry
        rewrites: Rewrite rule table
        environment: Host runtime facts and operations
        hooks: Action hook registry
    """

    options: OptionStore
    database: Database
    scheduler: Scheduler
    rewrites: RewriteRules
    environment: Environment
    hooks: HookRegistry = field(default_factory=HookRegistry)


__all__ = [
    "Database",
    "Environment",
    "HookRegistry",
    "Host",
    "HostError",
    "OptionStore",
    "RewriteRules",
    "Scheduler",
    "Table",
    "esc_like",
]
