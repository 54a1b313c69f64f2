class CaljdError(Exception):
    """Base error."""

class InvalidDateError(CaljdError, ValueError):
    """Raised when a day, month or time field is outside its calendar's range."""

class GregorianGapError(InvalidDateError):
    """Raised for the ten days (5-14 Oct 1582) dropped by the Gregorian reform."""

class MalformedUnitsError(CaljdError, ValueError):
    """Raised when a units string is not '<unit> since YYYY-MM-DD[ hh:mm:ss]'."""

class DayNumberOverflowError(CaljdError, OverflowError):
    """Raised when a day number does not fit the signed 32-bit range."""
