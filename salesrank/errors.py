"""Error taxonomy for the estimator and its request layers."""


class SalesRankError(Exception):
    """Base class for all SalesRank errors."""


class InvalidInput(SalesRankError, ValueError):
    """Raised when user-supplied input fails validation.

    The message is meant to be shown to the end user verbatim.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class UnknownCategory(SalesRankError, KeyError):
    """Raised when the estimator is asked about a category it has no calibration for."""

    def __init__(self, category: str):
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"Unknown category: {self.category}"


class DegenerateCalibration(SalesRankError, ValueError):
    """Raised when calibration data cannot be safely served."""

    def __init__(self, message: str, category: str | None = None):
        super().__init__(message)
        self.category = category
