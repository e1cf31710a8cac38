class IcalError(Exception):
    """Base class for errors raised while rendering an iCalendar document."""


class InvalidFieldValue(IcalError, ValueError):
    """A field cannot be written as a single iCalendar content line."""

    def __init__(self, field, value, reason=None):
        self.field = field
        self.value = value
        if reason is None:
            reason = f'has a {type(value).__name__} value, expected a scalar'
        super().__init__(f"Field {field!r} {reason}")
