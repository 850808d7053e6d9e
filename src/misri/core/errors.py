class MisriError(Exception):
    """Base error."""

class InvalidDateError(MisriError, ValueError):
    """Raised when a civil or lunar date does not exist."""

class DateRangeError(MisriError, ValueError):
    """Raised when a date falls outside the span an engine supports."""

class RegistryError(MisriError, KeyError):
    """Raised when an engine or attribute name is unknown or already taken."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""
