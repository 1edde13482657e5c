"""Exception types raised by the trust-score engine."""


class TrustScoreError(Exception):
    """Base class for all trustscore errors."""


class DomainError(TrustScoreError, ValueError):
    """A numeric precondition was violated (out-of-range rating, negative count, ...)."""


class SchemaError(TrustScoreError, LookupError):
    """A required column is missing from the input dataset."""

    def __init__(self, column: str, available=None) -> None:
        self.column = column
        self.available = list(available) if available is not None else []
        msg = f"Column '{column}' not found in data"
        if self.available:
            msg += f" (available: {', '.join(map(str, self.available))})"
        super().__init__(msg)

    def __str__(self) -> str:
        return self.args[0]
