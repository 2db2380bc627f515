"""
plugctl CLI - drive the plugin lifecycle against a host database.

Usage:
    plugctl activate                 Fire the activation hook
    plugctl deactivate               Fire the deactivation hook
    plugctl uninstall --yes          Run the uninstall handler
    plugctl info                     Show derived identifiers
    plugctl config [-o FILE]         Print or write the default settings file
"""

import argparse
import logging
import os
import sys

DEFAULT_DSN = os.environ.get("MYPLUGIN_DSN", "postgresql://localhost/wordpress")


class PlugctlError(Exception):
    """Base exception for plugctl errors."""

    pass


def _add_host_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--dsn", default=DEFAULT_DSN, help="Host database DSN")
    parser.add_argument("--table-prefix", default="wp_", help="Site table prefix")
    parser.add_argument(
        "--base-prefix", default=None, help="Network table prefix (multisite)"
    )
    parser.add_argument("--multisite", action="store_true", help="Network install")
    parser.add_argument("--host-version", default="6.4", help="Host application version")
    parser.add_argument(
        "--plugins-url",
        default="http://localhost/wp-content/plugins",
        help="Base URL of the plugins directory",
    )
    parser.add_argument("--debug", action="store_true", help="Host debug flag")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with one subcommand per host event."""
    parser = argparse.ArgumentParser(
        prog="plugctl",
        description="Run plugin lifecycle events against a host database",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    commands = parser.add_subparsers(dest="command")

    activate = commands.add_parser("activate", help="Fire the activation hook")
    _add_host_options(activate)

    deactivate = commands.add_parser("deactivate", help="Fire the deactivation hook")
    _add_host_options(deactivate)

    uninstall = commands.add_parser("uninstall", help="Run the uninstall handler")
    _add_host_options(uninstall)
    uninstall.add_argument(
        "--yes", action="store_true", help="Confirm the plugin is being deleted"
    )

    info = commands.add_parser("info", help="Show derived identifiers")
    info.add_argument("--table-prefix", default="wp_", help="Site table prefix")
    info.add_argument("--base-prefix", default=None, help="Network table prefix")
    info.add_argument(
        "--plugins-url",
        default="http://localhost/wp-content/plugins",
        help="Base URL of the plugins directory",
    )

    config = commands.add_parser("config", help="Print the default settings file")
    config.add_argument(
        "-o", "--output", default=None, help="Write to this file instead of printing"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for plugctl CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command is None:
            parser.print_help()
            return 0

        # Route to appropriate command
        if args.command in ("activate", "deactivate", "uninstall"):
            from plugctl.commands import lifecycle

            return getattr(lifecycle, f"{args.command}_command")(args)

        from plugctl.commands import info

        return getattr(info, f"{args.command}_command")(args)

    except PlugctlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
