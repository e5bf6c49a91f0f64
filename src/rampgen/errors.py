class ColorFormatError(ValueError):
    """A color string that cannot be read as hex."""


class ConfigError(ValueError):
    """Invalid palette configuration."""
