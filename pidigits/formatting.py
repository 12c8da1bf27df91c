import math


def ordinal_suffix(number: int) -> str:
    number = abs(int(number))
    if number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def ordinal(number: int) -> str:
    return f"{int(number)}{ordinal_suffix(number)}"


def format_elapsed(seconds: float) -> str:
    if seconds < 0:
        raise ValueError("seconds must be >= 0")
    total_ms = int(math.floor(seconds * 1000 + 0.5))
    minutes, rem = divmod(total_ms, 60_000)
    secs, ms = divmod(rem, 1000)
    return f"{minutes}:{secs:02d}.{ms:03d}"


def progress_fraction(a: int, limit: int) -> float:
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return max(0.0, min(1.0, a / limit))
