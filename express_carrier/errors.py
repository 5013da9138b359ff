class ViewDirectiveError(ValueError):
    """Raised when a view directive is built without a usable view name."""
    pass
