"""Display formatting shared by the file-based practicals."""

from __future__ import annotations

SIZE_UNITS_SHORT = ("B", "KB", "MB", "GB")
SIZE_UNITS_LONG = ("Bytes", "KB", "MB", "GB")


def format_file_size(num_bytes: int, units: tuple[str, ...] = SIZE_UNITS_SHORT) -> str:
    """
    Human-readable size in base-1024 units.

    The value is rounded to two decimals and trailing zeros are dropped,
    so 1536 -> "1.5 KB" and 2048 -> "2 KB". Zero is "0 <smallest unit>".
    """
    if num_bytes <= 0:
        return f"0 {units[0]}"

    value = float(num_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1

    rounded = round(value, 2)
    text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return f"{text} {units[index]}"


def parse_int(raw: str | int | None) -> int | None:
    """Leading-integer parse ("12abc" -> 12). None when nothing parses."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw

    text = raw.strip()
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return None


def parse_page_param(raw: str | int | None, default: int) -> int:
    """Positive integer query parameter; anything else gives default."""
    value = parse_int(raw)
    if value is None or value < 1:
        return default
    return value
