"""
Time formatting helpers shared by the handlers and the request logger.

Timestamps are rendered as RFC3339 strings with second precision, and elapsed
durations use the compact ``1h2m3.5s`` notation familiar from Go tooling and
container orchestrators.
"""

from datetime import datetime, timedelta


def format_rfc3339(moment: datetime) -> str:
    """
    Formats an aware datetime as an RFC3339 timestamp.

    UTC instants use the ``Z`` suffix; other offsets are kept as ``+HH:MM``.

    Args:
        moment: A timezone-aware datetime.

    Returns:
        The timestamp, e.g. ``2025-01-31T09:30:00Z``.

    Raises:
        ValueError: If ``moment`` is naive.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("RFC3339 timestamps require a timezone-aware datetime")
    return moment.isoformat(timespec="seconds").replace("+00:00", "Z")


def _format_fraction(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{fraction:0{width}d}".rstrip("0")


def format_duration(elapsed: timedelta) -> str:
    """
    Formats an elapsed time as a compact human-readable duration.

    Durations under one second are shown in ``µs`` or ``ms``; longer ones as
    hours, minutes and seconds, omitting leading zero units.

    Examples:
        ``timedelta(0)`` -> ``"0s"``, ``timedelta(milliseconds=250)`` ->
        ``"250ms"``, ``timedelta(hours=1, minutes=2, seconds=3.5)`` ->
        ``"1h2m3.5s"``.

    Args:
        elapsed: The duration to format.

    Returns:
        The formatted duration.
    """
    micros = (elapsed.days * 86_400 + elapsed.seconds) * 1_000_000 + elapsed.microseconds
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros == 0:
        return "0s"
    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_format_fraction(micros, 1_000)}ms"

    total_seconds, fraction = divmod(micros, 1_000_000)
    hours, remainder = divmod(total_seconds, 3_600)
    minutes, seconds = divmod(remainder, 60)

    text = f"{_format_fraction(seconds * 1_000_000 + fraction, 1_000_000)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text
