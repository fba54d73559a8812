"""Exception hierarchy for square viewing operations."""


class ViewerError(Exception):
    """Base exception for viewer operations."""

    pass


class DecodeError(ViewerError):
    """Malformed share or extended data square."""

    pass


class NodeError(ViewerError):
    """Error talking to the data availability node."""

    pass


class RenderError(ViewerError):
    """Terminal output stream could not be written."""

    pass


class ConfigError(ViewerError):
    """Configuration could not be loaded."""

    pass
