"""
Quote validation errors
Raised by the pricing engine when an input field cannot be priced
"""

import math


class QuoteError(ValueError):
    """Base class for quote input errors; carries the offending field and value"""

    def __init__(self, field: str, value, message: str):
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self):
        value = self.value
        if isinstance(value, float) and not math.isfinite(value):
            value = repr(value)
        elif not isinstance(value, (str, int, float, type(None))):
            value = repr(value)
        return {"error": str(self), "field": self.field, "value": value}


class InvalidEnumValue(QuoteError):
    """An enum-typed field holds a value outside its known set"""

    def __init__(self, field: str, value, allowed=None):
        message = f"Invalid value for {field}: {value!r}"
        if allowed:
            message += f" (expected one of: {', '.join(allowed)})"
        super().__init__(field, value, message)
        self.allowed = list(allowed or [])


class InvalidRange(QuoteError):
    """A numeric field is negative, not a finite number, or a non-integral count"""

    def __init__(self, field: str, value, reason: str = "must be a non-negative number"):
        super().__init__(field, value, f"Invalid value for {field}: {value!r} ({reason})")
        self.reason = reason
