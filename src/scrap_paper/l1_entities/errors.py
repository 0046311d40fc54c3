"""Domain error types."""


class MalformedStorageError(Exception):
    """Raised when the persisted snapshot blob cannot be parsed."""


class SurfaceCreationError(Exception):
    """Raised when the host refuses to create a scrap paper surface."""


class InvalidConfigError(Exception):
    """Raised when a config file is not valid YAML or its top level is not a mapping."""
