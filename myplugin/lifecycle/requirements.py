"""
Platform Requirements.

This module checks the interpreter and host versions the plugin needs.

Key features:
- Minimum Python and host versions
- Activation-time check (used by the activator)
- Init-time check that queues an admin notice and deactivates
"""

import logging
import platform
from dataclasses import dataclass

from myplugin.core.context import PluginContext
from myplugin.core.versions import version_at_least
from myplugin.host import Host
from myplugin.support.helpers import escape_html, translate

logger = logging.getLogger(__name__)

PYTHON = "python"
HOST = "host"


@dataclass(frozen=True)
class Requirements:
    """
    Minimum platform versions.

    Attributes:
        python: Minimum interpreter version
        host: Minimum host application version
    """

    python: str = "3.11"
    host: str = "6.0"


DEFAULT_REQUIREMENTS = Requirements()


def unmet_requirements(
    requirements: Requirements,
    host: Host,
    python_version: str | None = None,
) -> list[str]:
    """
    List the requirements the platform does not meet.

    Args:
        requirements: Minimum versions
        host: Host to read the host version from
        python_version: Interpreter version (defaults to the running one)

    Returns:
        Subset of ['python', 'host'], in check order
    """
    python_version = python_version or platform.python_version()
    unmet = []

    if not version_at_least(python_version, requirements.python):
        unmet.append(PYTHON)

    if not version_at_least(host.environment.host_version, requirements.host):
        unmet.append(HOST)

    return unmet


def check_requirements_on_init(
    context: PluginContext,
    host: Host,
    name: str,
    requirements: Requirements = DEFAULT_REQUIREMENTS,
    python_version: str | None = None,
) -> bool:
    """
    Verify requirements on every admin request.

    When a requirement is not met, queue an error notice for the first
    failing requirement and deactivate the plugin.

    Args:
        context: Plugin context
        host: Host
        name: Human-readable plugin name used in the notice
        requirements: Minimum versions
        python_version: Interpreter version (defaults to the running one)

    Returns:
        True if all requirements are met
    """
    unmet = unmet_requirements(requirements, host, python_version)
    if not unmet:
        return True

    environment = host.environment
    if unmet[0] == PYTHON:
        template = translate(context, host, "%s requires Python version %s or higher.")
        message = template % (name, requirements.python)
    else:
        template = translate(context, host, "%s requires host version %s or higher.")
        message = template % (name, requirements.host)

    logger.warning("Requirements not met for %s: %s", context.slug, ", ".join(unmet))
    environment.add_notice(escape_html(message), level="error")
    environment.deactivate_plugin(context.basename)
    return False
