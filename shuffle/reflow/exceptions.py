"""Custom exceptions for the line reflow engine."""


class ReflowError(Exception):
    """Base exception for reflow errors.

    The transform layer catches this and degrades to the non-reflowed path,
    so a failing reflow never fails the whole transformation.
    """

    pass


class MeasurementError(ReflowError):
    """The text-measurement capability failed or returned an unusable width.

    Raised when the measurer itself raises, or when it returns a value that
    is not a finite, non-negative number.
    """

    def __init__(self, message: str, fragment: str, font_size: float) -> None:
        """Initialize measurement error with the fragment being measured.

        Args:
            message: Human-readable error message
            fragment: Text fragment whose measurement failed
            font_size: Font size the fragment was measured at
        """
        super().__init__(message)
        self.fragment = fragment
        self.font_size = font_size
