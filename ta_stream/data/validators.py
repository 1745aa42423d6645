"""
Consistency rules for a single OHLCV quote.

The same predicate backs QuoteBuilder.build() and Quote.is_ok(), so a record
that was accepted once always re-checks as valid.
"""

QUOTE_FIELDS = ("open", "high", "low", "close", "volume")


def find_quote_violations(open_: float, high: float, low: float,
                          close: float, volume: float) -> list[str]:
    """
    List every OHLCV relationship the values break.

    NaN never compares true, so any NaN field yields at least one violation.

    Returns:
        Human-readable rule descriptions, empty when the quote is consistent
    """
    violations = []

    if not low <= open_:
        violations.append("low must not exceed open")
    if not open_ <= high:
        violations.append("open must not exceed high")
    if not low <= close:
        violations.append("low must not exceed close")
    if not close <= high:
        violations.append("close must not exceed high")
    if not low >= 0.0:
        violations.append("low must be non-negative")
    if not volume >= 0.0:
        violations.append("volume must be non-negative")

    return violations


def is_valid_quote(open_: float, high: float, low: float,
                   close: float, volume: float) -> bool:
    """True when low <= open/close <= high, low >= 0 and volume >= 0."""
    return not find_quote_violations(open_, high, low, close, volume)
