class KurdcalError(Exception):
    """Base error."""

class OutOfRangeError(KurdcalError, ValueError):
    """Raised when a year, month, day or longitude lies outside its valid bounds."""

class CrossEngineError(KurdcalError, TypeError):
    """Raised when an operation mixes engine kinds or reference longitudes."""

class DateParseError(KurdcalError, ValueError):
    """Raised when text cannot be read as a calendar date."""
