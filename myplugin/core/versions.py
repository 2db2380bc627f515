"""
Version comparison helpers.

Host and interpreter versions are dotted numbers that may carry a
pre-release suffix (e.g., '6.5-RC1', '3.12.0rc1'). Only the leading
numeric parts take part in comparisons.
"""

import re

_LEADING_DIGITS = re.compile(r"^(\d+)")


def _numeric_parts(version: str) -> list[int]:
    parts = []
    for segment in version.strip().split("."):
        match = _LEADING_DIGITS.match(segment)
        if not match:
            break
        parts.append(int(match.group(1)))
        # A suffix ends the numeric portion ('0rc1' -> 0, stop)
        if match.end() != len(segment):
            break
    return parts


def compare_versions(v1: str, v2: str) -> int:
    """
    Compare two version strings.

    Args:
        v1: First version
        v2: Second version

    Returns:
        -1 if v1 < v2, 0 if v1 == v2, 1 if v1 > v2
    """
    parts1 = _numeric_parts(v1)
    parts2 = _numeric_parts(v2)

    # Pad shorter version with zeros
    max_len = max(len(parts1), len(parts2))
    parts1.extend([0] * (max_len - len(parts1)))
    parts2.extend([0] * (max_len - len(parts2)))

    for p1, p2 in zip(parts1, parts2, strict=True):
        if p1 < p2:
            return -1
        elif p1 > p2:
            return 1
    return 0


def version_at_least(version: str, minimum: str) -> bool:
    """Check that version is greater than or equal to minimum."""
    return compare_versions(version, minimum) >= 0
