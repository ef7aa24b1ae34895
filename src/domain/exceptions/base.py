"""Base domain exception."""


class DomainException(Exception):
    """
    Root of every error the domain raises on purpose.

    ``code`` is a stable, machine-readable identifier (e.g.
    ``STORAGE_UNAVAILABLE``) that ends up as the ``error`` field of API
    error bodies; ``message`` is for humans.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}
