from __future__ import annotations


class PropcheckError(Exception):
    pass


class UnsatisfiableFilterError(PropcheckError, RuntimeError):
    def __init__(self, attempts: int, description: str = "filter") -> None:
        super().__init__(
            f"{description} rejected {attempts} consecutive samples; "
            "the predicate is too strict for the wrapped producer"
        )
        self.attempts = attempts
        self.description = description
