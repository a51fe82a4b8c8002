"""Errors raised by the screening pipeline."""


class ScreeningError(Exception):
    """Base class for screening pipeline errors."""


class ConfigurationError(ScreeningError):
    """Screening was requested without usable job requirements.

    Raised when the required-skill list is empty (the match ratio has no
    denominator) or when no job requirement has been set at all.
    """
