from datetime import datetime, timezone
from typing import Any, Optional


def format_relative_time(timestamp: datetime, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    seconds = (now - timestamp).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    return f"{days}d ago"


def human_file_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    size = float(num_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024
        if size < 1024 or unit == "GB":
            return f"{size:.1f} {unit}"


def parse_backend_date(value: Any) -> Optional[datetime]:
    """
    Read the date shapes the backend emits: ISO strings, epoch
    milliseconds (or seconds), and ``[year, month, day]`` arrays.
    Returns ``None`` for anything else.
    """
    try:
        if isinstance(value, str):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            seconds = value / 1000 if abs(value) > 1e11 else value
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        if isinstance(value, (list, tuple)) and len(value) >= 2:
            year, month = int(value[0]), int(value[1])
            day = int(value[2]) if len(value) > 2 else 1
            return datetime(year, month, day)
    except (ValueError, TypeError, OverflowError, OSError):
        return None
    return None


def format_month_year(value: Any) -> str:
    """Backend date -> 'Jan 2023'. Missing dates mean the role is ongoing."""
    if value is None or value == "":
        return "Present"
    parsed = parse_backend_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime("%b %Y")


def split_sentences(text: str, limit: int) -> str:
    sentences = [s for s in text.split(". ") if s]
    summary = ". ".join(sentences[:limit])
    return summary if summary.endswith(".") else summary + "."
