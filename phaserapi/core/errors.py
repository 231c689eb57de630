"""Exception hierarchy for the Phaser API generator."""


class PhaserApiError(Exception):
    """Base class for all generator errors."""


class ConfigError(PhaserApiError):
    """The configuration file exists but cannot be parsed."""


class ModelLoadError(PhaserApiError):
    """The JSDoc model inputs are missing or unreadable."""


class BuildError(PhaserApiError):
    """Reading the supplemental script or writing the output failed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
