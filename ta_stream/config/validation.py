"""Configuration validation utilities."""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates indicator parameters before construction."""

    @staticmethod
    def validate_indicator_params(
        indicator: str,
        params: dict[str, Any],
        allowed_fields: Optional[set[str]] = None
    ) -> list[ValidationError]:
        """
        Validate construction parameters for one indicator.

        Args:
            indicator: Indicator key, used in messages
            params: Parameter mapping passed to the constructor
            allowed_fields: Accepted parameter names; None skips the check

        Returns:
            Every problem found, empty when the parameters are usable
        """
        errors = []

        if allowed_fields is not None:
            for field in sorted(set(params) - allowed_fields):
                errors.append(ValidationError(
                    field=field,
                    message=f"Unknown parameter for {indicator}",
                    value=params[field]
                ))

        # Periods: window lengths and smoothing horizons
        for field, value in params.items():
            if not field.endswith("period"):
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                errors.append(ValidationError(
                    field=field,
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate multiplier
        if "multiplier" in params:
            value = params["multiplier"]
            if isinstance(value, bool) or not isinstance(value, Real) or not value > 0:
                errors.append(ValidationError(
                    field="multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        # Fast horizon must be shorter than slow horizon
        fast = params.get("fast_period")
        slow = params.get("slow_period")
        if isinstance(fast, int) and isinstance(slow, int) and fast >= slow:
            errors.append(ValidationError(
                field="fast_period",
                message="Must be shorter than slow_period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_config(
        config: dict[str, Any],
        allowed_fields: Optional[dict[str, set[str]]] = None
    ) -> dict[str, list[ValidationError]]:
        """
        Validate a merged configuration.

        Returns:
            Errors keyed by indicator; indicators without errors are omitted
        """
        results = {}
        for indicator, params in config.items():
            if not isinstance(params, dict):
                results[indicator] = [ValidationError(
                    field=indicator,
                    message="Must be a mapping of parameter names to values",
                    value=params
                )]
                continue

            allowed = allowed_fields.get(indicator) if allowed_fields else None
            errors = ConfigValidator.validate_indicator_params(indicator, params, allowed)
            if errors:
                results[indicator] = errors
        return results
