"""
plugctl lifecycle commands.

Fire the host events the plugin registered callbacks for.
"""

import sys
from typing import Any

from myplugin import plugin, uninstall
from myplugin.lifecycle.errors import RequirementsError
from plugctl.cli import PlugctlError
from plugctl.runtime import build_host


def activate_command(args: Any) -> int:
    """
    Execute activate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    host = build_host(args)
    context = plugin.register(host)

    try:
        host.hooks.do_action(f"activate_{context.basename}")
    except RequirementsError as e:
        print(e.title, file=sys.stderr)
        print(e.message, file=sys.stderr)
        return 1

    host.environment.activate_plugin(context.basename)

    if args.verbose:
        print(f"Activated {context.slug} {context.version}")

    return 0


def deactivate_command(args: Any) -> int:
    """Execute deactivate command."""
    host = build_host(args)
    context = plugin.register(host)

    host.hooks.do_action(f"deactivate_{context.basename}")
    host.environment.deactivate_plugin(context.basename)

    if args.verbose:
        print(f"Deactivated {context.slug}")

    return 0


def uninstall_command(args: Any) -> int:
    """
    Execute uninstall command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero if any removal pass failed)
    """
    if not args.yes:
        raise PlugctlError("Refusing to uninstall without --yes")

    host = build_host(args, uninstalling=True)
    report = uninstall.run(host)

    if report is None:
        print("Data kept (keep_data_on_uninstall is enabled)")
        return 0

    for name, count in report.removed.items():
        print(f"{name}: {count} removed")
    for name, error in report.errors.items():
        print(f"{name}: failed: {error}", file=sys.stderr)

    return 0 if report.ok else 1
