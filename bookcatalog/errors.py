class CatalogRequestError(RuntimeError):
    """A catalog request did not succeed. Carries only a message naming the
    failed operation."""


class NoSessionError(Exception):
    """No signed-in user session is available."""
