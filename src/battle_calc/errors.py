"""Error taxonomy for battle_calc.

Only configuration problems raise. Observations that no IV can reproduce are
an expected outcome and are reported as empty (``None``) IV ranges instead.
"""

from typing import Any


class BattleCalcError(Exception):
    """Base class for errors raised by the calculators."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class MissingConfigurationError(BattleCalcError, ValueError):
    """A mandatory input was not supplied."""

    def __init__(self, field: str, reason: str | None = None):
        message = f"{field} parameter is required"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message, {"field": field})
        self.field = field


class UnsupportedValueError(BattleCalcError, ValueError):
    """An enum value has no formula or table entry."""

    def __init__(self, kind: str, value: Any):
        super().__init__(f"Unsupported {kind}: {value!r}.", {"kind": kind, "value": value})
        self.kind = kind
        self.value = value
