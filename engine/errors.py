class LoadError(ValueError):
    """A source record could not be used (bad status discriminator, unreadable file)."""
