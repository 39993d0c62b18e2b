"""
Exceptions raised by kiters.

Encoding, mixing and counter advance are total and never raise; the only
failures are misconfiguration caught when a generator is built.
"""


class KitersError(Exception):
    """Base exception for kiters."""

    pass


class InvalidWidthError(KitersError, ValueError):
    """Raised when an id width other than narrow (6) or wide (11) is requested."""

    def __init__(self, width):
        self.width = width
        super().__init__(f"Unsupported request id width: {width!r} (expected 6 or 11)")
