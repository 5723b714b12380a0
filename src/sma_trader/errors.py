class InvalidInputError(ValueError):
    """Raised when prices, windows or balances handed to the simulator are malformed."""


class ConfigError(ValueError):
    """Raised when the YAML configuration cannot be read or does not validate."""
