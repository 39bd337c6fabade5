"""
Date resolution for values written into report tables.
"""

from datetime import datetime
from typing import Iterable, Optional, Tuple

from ..core.config import Config


def _try_formats(value: str, formats: Iterable[str]) -> Optional[datetime]:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_invariant(value: str) -> Optional[datetime]:
    """Parse a date using culture independent formats (ISO first)."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    return _try_formats(value, Config.INVARIANT_DATE_FORMATS)


def parse_local(value: str) -> Optional[datetime]:
    """Parse a date using the current locale and the configured day-first formats."""
    return _try_formats(value, ('%x', '%c') + tuple(Config.LOCAL_DATE_FORMATS))


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a date string in two stages.

    Stage one tries invariant formats, stage two falls back to locale
    formats. Returns None when neither stage accepts the value.
    """
    value = value.strip()
    parsed = parse_invariant(value)
    if parsed is None:
        parsed = parse_local(value)
    return parsed


def resolve_date(raw: Optional[str], now: Optional[datetime] = None) -> Tuple[str, Optional[str]]:
    """
    Resolve a raw date input to ``yyyy-MM-dd`` text.

    Args:
        raw: Input text; blank means "today"
        now: Reference timestamp, defaults to the current local time

    Returns:
        Tuple of the formatted date and a warning (None when the input was usable)
    """
    if now is None:
        now = datetime.now()

    if raw is None or not raw.strip():
        return now.strftime(Config.OUTPUT_DATE_FORMAT), None

    parsed = parse_date(raw)
    if parsed is None:
        return now.strftime(Config.OUTPUT_DATE_FORMAT), f"Date '{raw}' could not be parsed. Using current date."

    return parsed.strftime(Config.OUTPUT_DATE_FORMAT), None
