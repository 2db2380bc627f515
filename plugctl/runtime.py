"""Host construction for plugctl commands."""

from typing import Any

from myplugin.host import Host, HostError
from myplugin.host.cron import OptionScheduler
from myplugin.host.postgres import LocalEnvironment, PostgresDatabase, PostgresOptionStore
from myplugin.host.rewrite import OptionRewriteRules
from plugctl.cli import PlugctlError


def build_host(args: Any, uninstalling: bool = False) -> Host:
    """
    Build a PostgreSQL-backed host from parsed arguments.

    Args:
        args: Parsed command-line arguments
        uninstalling: Whether the host is deleting the plugin

    Returns:
        Host instance

    Raises:
        PlugctlError: If the database is unreachable
    """
    try:
        database = PostgresDatabase.connect(
            args.dsn,
            prefix=args.table_prefix,
            base_prefix=args.base_prefix,
            multisite=args.multisite,
        )
    except HostError as e:
        raise PlugctlError(str(e)) from e

    options = PostgresOptionStore(database)
    environment = LocalEnvironment(
        options,
        host_version=args.host_version,
        plugins_url=args.plugins_url,
        debug=args.debug,
        is_cli=True,
        uninstalling=uninstalling,
    )

    return Host(
        options=options,
        database=database,
        scheduler=OptionScheduler(options),
        rewrites=OptionRewriteRules(options),
        environment=environment,
    )
