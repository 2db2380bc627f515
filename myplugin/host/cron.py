"""
Option-backed scheduler.

Scheduled runs live in the 'cron' option as
{timestamp: {hook: [args, ...]}}, the layout the host cron reads.
"""

from collections.abc import Sequence
from typing import Any

from myplugin.host.ports import OptionStore, Scheduler

CRON_OPTION = "cron"


class OptionScheduler(Scheduler):
    """Scheduler persisting its queue in an OptionStore."""

    def __init__(self, options: OptionStore):
        self._options = options

    def _load(self) -> dict[str, dict[str, list[list[Any]]]]:
        return dict(self._options.get(CRON_OPTION, {}) or {})

    def schedule(self, hook: str, timestamp: int, args: Sequence[Any] = ()) -> None:
        queue = self._load()
        # Option values round-trip through JSON, so timestamps are string keys
        runs = queue.setdefault(str(timestamp), {})
        runs.setdefault(hook, []).append(list(args))
        self._options.update(CRON_OPTION, queue)

    def scheduled(self, hook: str) -> list[int]:
        """Timestamps hook is scheduled at, ascending."""
        return sorted(int(ts) for ts, runs in self._load().items() if hook in runs)

    def clear(self, hook: str) -> int:
        queue = self._load()
        removed = 0

        for timestamp in list(queue):
            runs = queue[timestamp]
            if hook not in runs:
                continue
            removed += len(runs.pop(hook))
            if not runs:
                del queue[timestamp]

        # Unscheduled hook: nothing to write back
        if removed:
            self._options.update(CRON_OPTION, queue)

        return removed
