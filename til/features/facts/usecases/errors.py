"""Custom exceptions for fact use cases."""


class FactValidationError(ValueError):
    """Raised when a new fact fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class FactNotFoundError(LookupError):
    """Raised when the targeted fact does not exist in the remote store."""

    def __init__(self, fact_id: int):
        self.fact_id = fact_id
        super().__init__(f"Fact '{fact_id}' not found")
