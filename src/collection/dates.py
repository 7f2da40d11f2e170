"""Best-effort year extraction from free-text date labels."""

import re

FOUR_DIGIT_YEAR = re.compile(r"\b(\d{4})\b")
ORDINAL_CENTURY = re.compile(r"(\d+)(st|nd|rd|th)\s+century", re.IGNORECASE)


def parse_year(label: str | None) -> int:
    """Derive one representative year from a date label.

    A four-digit year wins; otherwise an ordinal century maps to its
    midpoint. Returns 0 when nothing matches, which callers must read as
    "unknown".

    Example:
        >>> parse_year("ca. 1503")
        1503
        >>> parse_year("17th century")
        1650
        >>> parse_year("undated")
        0
    """
    if not label:
        return 0

    match = FOUR_DIGIT_YEAR.search(label)
    if match:
        return int(match.group(1))

    match = ORDINAL_CENTURY.search(label)
    if match:
        century = int(match.group(1))
        return (century - 1) * 100 + 50

    return 0
