"""
Canonical quote model consumed by indicators.

A Quote is an immutable, validated OHLCV observation for one time step.
Quotes are assembled through QuoteBuilder, which keeps every field optional
until build() is called.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Optional, Union

from ta_stream.errors import QuoteIncompleteError, QuoteInvalidError

from .validators import QUOTE_FIELDS, find_quote_violations, is_valid_quote


@dataclass(frozen=True)
class Quote:
    """Validated OHLCV observation."""
    open: float        # Opening price
    high: float        # High price
    low: float         # Low price
    close: float       # Closing price
    volume: float      # Traded volume

    def __post_init__(self):
        violations = find_quote_violations(self.open, self.high, self.low, self.close, self.volume)
        if violations:
            raise QuoteInvalidError(
                f"Inconsistent quote: {'; '.join(violations)}",
                quote_values=self.as_dict(),
                violations=violations,
            )

    @classmethod
    def builder(cls) -> "QuoteBuilder":
        """Start an empty builder."""
        return QuoteBuilder()

    def is_ok(self) -> bool:
        """Re-check the construction invariants."""
        return is_valid_quote(self.open, self.high, self.low, self.close, self.volume)

    def as_dict(self) -> dict[str, float]:
        return {field: getattr(self, field) for field in QUOTE_FIELDS}

    @property
    def typical_price(self) -> float:
        """(high + low + close) / 3"""
        return (self.high + self.low + self.close) / 3.0


class QuoteBuilder:
    """
    Staged quote construction.

    Each setter returns a new builder holding the added field; the receiver is
    left untouched. Nothing is validated until build().

    Example:
        quote = (Quote.builder()
                 .open(20.0).high(25.0).low(15.0).close(21.0).volume(7500.0)
                 .build())
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[dict[str, float]] = None):
        self._fields = dict(fields or {})

    def _with(self, field: str, value: float) -> "QuoteBuilder":
        return QuoteBuilder({**self._fields, field: value})

    def open(self, value: float) -> "QuoteBuilder":
        return self._with("open", value)

    def high(self, value: float) -> "QuoteBuilder":
        return self._with("high", value)

    def low(self, value: float) -> "QuoteBuilder":
        return self._with("low", value)

    def close(self, value: float) -> "QuoteBuilder":
        return self._with("close", value)

    def volume(self, value: float) -> "QuoteBuilder":
        return self._with("volume", value)

    @property
    def missing_fields(self) -> list[str]:
        """Fields not yet supplied, in OHLCV order."""
        return [field for field in QUOTE_FIELDS if field not in self._fields]

    def build(self) -> Quote:
        """
        Finalize the quote.

        Raises:
            QuoteIncompleteError: If any of the five fields was never set
            QuoteInvalidError: If the completed record is inconsistent
        """
        missing = self.missing_fields
        if missing:
            raise QuoteIncompleteError(
                f"Quote is missing fields: {', '.join(missing)}",
                missing_fields=missing,
            )

        return Quote(**{field: float(self._fields[field]) for field in QUOTE_FIELDS})

    def __repr__(self) -> str:
        return f"QuoteBuilder({self._fields!r})"


Observation = Union[float, Quote]


def _field_of(observation: Observation, field: str) -> float:
    if isinstance(observation, Quote):
        return getattr(observation, field)
    if isinstance(observation, Real):
        return float(observation)
    raise TypeError(
        f"Expected a number or Quote, got {type(observation).__name__}"
    )


def open_of(observation: Observation) -> float:
    """Open of a quote, or the bare number itself."""
    return _field_of(observation, "open")


def high_of(observation: Observation) -> float:
    """High of a quote, or the bare number itself."""
    return _field_of(observation, "high")


def low_of(observation: Observation) -> float:
    """Low of a quote, or the bare number itself."""
    return _field_of(observation, "low")


def close_of(observation: Observation) -> float:
    """Close of a quote, or the bare number itself."""
    return _field_of(observation, "close")


def volume_of(observation: Observation) -> float:
    """Volume of a quote; a bare number carries no volume."""
    if isinstance(observation, Quote):
        return observation.volume
    return 0.0
