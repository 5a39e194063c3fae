"""Exception types raised by unixstamp."""

OFFSET_PATTERN = (
    "[+|-] [{years}y] [{months}M] [{weeks}w] [{days}d] "
    "[{hours}h] [{minutes}m] [{seconds}s] [{milliseconds}ms]"
)


class OffsetFormatError(ValueError):
    """Raised when an offset string does not match the expected format."""

    def __init__(self, text: str, position: int | None, reason: str) -> None:
        where = "end of string" if position is None else f"position {position}"
        super().__init__(
            f"Invalid offset string {text!r}: {reason} at {where}.\n"
            f"Expected offset string format: {OFFSET_PATTERN}\n"
            f"Example: '-1y 2M 3w 5d 8h 13m 21s 34ms'"
        )
        self.text: str = text
        self.position: int | None = position
        self.reason: str = reason
