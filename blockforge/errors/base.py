class BlockforgeError(Exception):
    """Root of every error the library raises on purpose."""
