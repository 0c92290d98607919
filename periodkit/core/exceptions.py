"""
Exception classes for period computation.
"""


class PeriodKitError(Exception):
    """Base class for errors raised by periodkit."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidTimezoneFormatError(PeriodKitError):
    """Raised when a timezone offset text is present but cannot be parsed."""

    def __init__(self, offset_text: str):
        super().__init__(f"Cannot parse timezone offset: {offset_text!r}")
        self.offset_text = offset_text


class UnsupportedPresetError(PeriodKitError):
    """Raised when a preset date range is not one of the known variants."""

    def __init__(self, preset):
        super().__init__(f"Unsupported date range: {preset}")
        self.preset = preset


class UnsupportedDateFormatError(PeriodKitError):
    """Raised when a date format is not one of the known patterns."""

    def __init__(self, date_format):
        super().__init__(f"Unsupported date format: {date_format}")
        self.date_format = date_format
