"""plugctl offline commands."""

from pathlib import Path
from typing import Any

from myplugin import plugin
from myplugin.config import ConfigError, generate_default_config, write_default_config
from myplugin.core.context import NETWORK_SCOPE, PluginContext
from myplugin.host.memory import StaticEnvironment, create_memory_host
from myplugin.lifecycle.activator import KEEP_DATA_OPTION, VERSION_OPTION
from myplugin.lifecycle.deactivator import SCHEDULED_HOOKS
from plugctl.cli import PlugctlError


def info_command(args: Any) -> int:
    """Print the identifiers the plugin derives for a host layout."""
    # Identifiers are pure derivations: an offline host is enough
    host = create_memory_host(
        prefix=args.table_prefix,
        base_prefix=args.base_prefix,
        environment=StaticEnvironment(
            plugins_dir=str(Path(plugin.__file__).resolve().parent.parent),
            plugins_url=args.plugins_url,
        ),
    )
    context = PluginContext.create(plugin.plugin_config(), host)

    rows = [
        ("slug", context.slug),
        ("version", context.version),
        ("basename", context.basename),
        ("path", context.path()),
        ("url", context.url()),
        ("version option", context.option_key(VERSION_OPTION)),
        ("keep data option", context.option_key(KEEP_DATA_OPTION)),
        ("meta prefix", context.meta_key("")),
        ("example table", context.table_name("example")),
        ("example network table", context.table_name("example", NETWORK_SCOPE)),
    ]
    rows.extend(("cron hook", context.cron_hook(hook)) for hook in SCHEDULED_HOOKS)

    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label.ljust(width)}  {value}")

    return 0


def config_command(args: Any) -> int:
    """Print the default settings file, or write it with --output."""
    if not args.output:
        print(generate_default_config(), end="")
        return 0

    output = Path(args.output)
    try:
        write_default_config(output)
    except ConfigError as e:
        raise PlugctlError(str(e)) from e

    print(f"Wrote {output}")
    return 0
