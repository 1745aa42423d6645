"""Tests for quote construction and validation"""

import dataclasses

import pytest

from ta_stream.data.models import Quote, QuoteBuilder, close_of, high_of, low_of, open_of, volume_of
from ta_stream.data.validators import find_quote_violations, is_valid_quote
from ta_stream.errors import DataQualityError, QuoteIncompleteError, QuoteInvalidError


def build(open_, high, low, close, volume):
    return (Quote.builder()
            .open(open_)
            .high(high)
            .low(low)
            .close(close)
            .volume(volume)
            .build())


class TestQuoteBuilder:
    """Test staged quote construction"""

    @pytest.mark.parametrize("record", [
        # open, high, low, close, volume
        (20.0, 25.0, 15.0, 21.0, 7500.0),
        (10.0, 10.0, 10.0, 10.0, 10.0),
        (0.0, 0.0, 0.0, 0.0, 0.0),
    ])
    def test_valid_records(self, record):
        """Consistent records build and re-check as valid"""
        quote = build(*record)
        assert quote.is_ok()
        assert (quote.open, quote.high, quote.low, quote.close, quote.volume) == record

    @pytest.mark.parametrize("record", [
        # open, high, low, close, volume
        (-1.0, 25.0, 15.0, 21.0, 7500.0),
        (20.0, -1.0, 15.0, 21.0, 7500.0),
        (20.0, 25.0, 15.0, -1.0, 7500.0),
        (20.0, 25.0, 15.0, 21.0, -1.0),
        (14.9, 25.0, 15.0, 21.0, 7500.0),
        (25.1, 25.0, 15.0, 21.0, 7500.0),
        (20.0, 25.0, 15.0, 14.9, 7500.0),
        (20.0, 25.0, 15.0, 25.1, 7500.0),
        (20.0, 15.0, 25.0, 21.0, 7500.0),
        (0.0, 1.0, -0.5, 0.0, 1.0),
    ])
    def test_invalid_records(self, record):
        """Inconsistent records are rejected as invalid"""
        with pytest.raises(QuoteInvalidError) as exc_info:
            build(*record)

        assert exc_info.value.violations
        assert exc_info.value.quote_values["open"] == record[0]

    def test_incomplete_builder(self):
        """Missing fields are reported in OHLCV order"""
        builder = Quote.builder().high(25.0).close(21.0)

        with pytest.raises(QuoteIncompleteError) as exc_info:
            builder.build()

        assert exc_info.value.missing_fields == ["open", "low", "volume"]

    def test_empty_builder(self):
        """A fresh builder is missing everything"""
        with pytest.raises(QuoteIncompleteError) as exc_info:
            QuoteBuilder().build()

        assert exc_info.value.missing_fields == ["open", "high", "low", "close", "volume"]

    def test_incomplete_checked_before_invalid(self):
        """Completeness is checked before consistency"""
        builder = Quote.builder().open(30.0).high(25.0).low(15.0).close(21.0)

        with pytest.raises(QuoteIncompleteError):
            builder.build()

    def test_setters_return_new_builder(self):
        """Setting a field leaves the previous builder unchanged"""
        empty = Quote.builder()
        with_open = empty.open(20.0)

        assert with_open is not empty
        assert empty.missing_fields == ["open", "high", "low", "close", "volume"]
        assert with_open.missing_fields == ["high", "low", "close", "volume"]

    def test_later_setter_wins(self):
        """Setting a field twice keeps the last value"""
        quote = (Quote.builder()
                 .open(20.0).high(25.0).low(15.0).close(21.0).volume(7500.0)
                 .close(22.0)
                 .build())
        assert quote.close == 22.0

    def test_input_errors_are_recoverable(self):
        """Input errors belong to the data quality family"""
        with pytest.raises(DataQualityError) as exc_info:
            QuoteBuilder().build()
        assert exc_info.value.recoverable is True


class TestQuote:
    """Test the built quote record"""

    def test_direct_construction_validates(self):
        """Constructing a Quote directly applies the same rules"""
        with pytest.raises(QuoteInvalidError):
            Quote(open=30.0, high=25.0, low=15.0, close=21.0, volume=100.0)

    def test_nan_field_is_invalid(self):
        """NaN fails every comparison and is rejected"""
        with pytest.raises(QuoteInvalidError):
            build(float("nan"), 25.0, 15.0, 21.0, 100.0)

    def test_immutable(self, sample_quote):
        """Quotes have no mutation API"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_quote.close = 1.0

    def test_value_equality(self, sample_quote):
        """Quotes have no identity beyond their values"""
        same = build(100.0, 105.0, 99.0, 103.0, 1000.0)
        assert same == sample_quote
        assert hash(same) == hash(sample_quote)

    def test_typical_price(self, sample_quote):
        """Typical price averages high, low and close"""
        assert sample_quote.typical_price == pytest.approx((105.0 + 99.0 + 103.0) / 3)

    def test_as_dict(self, sample_quote):
        assert sample_quote.as_dict() == {
            "open": 100.0, "high": 105.0, "low": 99.0, "close": 103.0, "volume": 1000.0,
        }


class TestFieldAccessors:
    """Test field accessors over quotes and bare numbers"""

    def test_quote_fields(self, sample_quote):
        assert open_of(sample_quote) == 100.0
        assert high_of(sample_quote) == 105.0
        assert low_of(sample_quote) == 99.0
        assert close_of(sample_quote) == 103.0
        assert volume_of(sample_quote) == 1000.0

    def test_bare_number(self):
        """A bare number stands in for every price field"""
        assert open_of(7) == 7.0
        assert high_of(7.5) == 7.5
        assert low_of(7.5) == 7.5
        assert close_of(7.5) == 7.5
        assert volume_of(7.5) == 0.0

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            close_of("101.5")


class TestQuoteValidators:
    """Test the shared consistency predicate"""

    def test_consistent_quote(self):
        assert is_valid_quote(20.0, 25.0, 15.0, 21.0, 7500.0)
        assert find_quote_violations(20.0, 25.0, 15.0, 21.0, 7500.0) == []

    def test_reports_each_violation(self):
        """Every broken rule is listed"""
        violations = find_quote_violations(30.0, 25.0, -1.0, 21.0, -5.0)
        assert "open must not exceed high" in violations
        assert "low must be non-negative" in violations
        assert "volume must be non-negative" in violations
        assert not is_valid_quote(30.0, 25.0, -1.0, 21.0, -5.0)
