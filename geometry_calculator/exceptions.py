########################
# Exceptions           #
########################


class CalculatorError(Exception):
    """Base class for every error raised by the geometry calculator."""
    pass


class ValidationError(CalculatorError):
    """
    Raised when raw console text cannot be turned into an acceptable value.

    ``kind`` is ``"format"`` when the text is not a number at all and
    ``"range"`` when it parses but violates the required bound. The message is
    the text shown to the user.
    """

    FORMAT = "format"
    RANGE = "range"

    def __init__(self, message: str, kind: str = FORMAT):
        super().__init__(message)
        self.kind = kind


class OperationError(CalculatorError):
    """Raised when a calculation cannot be dispatched or carried out."""
    pass


class UnknownShapeError(OperationError):
    """Raised when an area or perimeter is requested for an unrecognized shape."""
    pass


class ConfigurationError(CalculatorError):
    pass
