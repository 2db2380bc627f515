"""
Option-backed rewrite rules.

Rules registered with add() are pending until flush() writes the whole
table to the 'rewrite_rules' option as an ordered {regex: query} map.
"""

from myplugin.host.ports import HostError, OptionStore, RewriteRule, RewriteRules

REWRITE_OPTION = "rewrite_rules"

POSITIONS = ("top", "bottom")


class OptionRewriteRules(RewriteRules):
    """Rewrite rule table persisted in an OptionStore."""

    def __init__(self, options: OptionStore):
        self._options = options
        self._top: list[RewriteRule] = []
        self._bottom: list[RewriteRule] = []
        self.flush_count = 0

    def add(self, regex: str, query: str, position: str = "bottom") -> None:
        if position not in POSITIONS:
            raise HostError(f"Invalid rewrite rule position: {position}")

        rule = RewriteRule(regex=regex, query=query, position=position)
        target = self._top if position == "top" else self._bottom
        target.append(rule)

    def rules(self) -> list[RewriteRule]:
        return self._top + self._bottom

    def flush(self) -> None:
        table: dict[str, str] = {}
        for rule in self.rules():
            # First registration of a regex wins
            table.setdefault(rule.regex, rule.query)

        self._options.update(REWRITE_OPTION, table)
        self.flush_count += 1
