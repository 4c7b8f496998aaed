class InvalidInputError(ValueError):
    """Raised when a problem is malformed (bad dimensions, non-finite data, unsupported forms)."""
