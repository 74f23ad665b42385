"""Custom exception hierarchy for gesture recognition errors."""


class HGSError(Exception):
    """Base exception for SDK errors."""


class InvalidInputError(HGSError):
    """Raised when a frame violates the landmark input contract."""


class ParseError(HGSError):
    """Raised when incoming landmark or rectangle lines cannot be parsed."""


class RecognizerError(HGSError):
    """Base exception for high-level recognizer errors."""


class RecognizerConfigurationError(RecognizerError):
    """Raised when recognizer configuration or track ownership is invalid."""


class RecognizerCallbackError(RecognizerError):
    """Raised when a user callback invoked by the recognizer fails."""


class VisualizationDependencyError(HGSError):
    """Raised when the optional ``rerun`` dependency is not installed."""
