"""Errors that stop a linking run."""


class SymlinkerError(Exception):
    """Base class for errors that stop a linking run."""


class InvalidChoiceError(SymlinkerError):
    """Raised when the answer to a conflict prompt is not a known option."""

    def __init__(self, answer: str):
        super().__init__(f"Invalid option '{answer}'")
        self.answer = answer
