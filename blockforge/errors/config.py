from .base import BlockforgeError


class ConfigError(BlockforgeError):
    """The configuration file is missing, unparsable or incomplete."""
