"""Homework-related domain exceptions."""

from .base import DomainException


class HomeworkNotFoundException(DomainException):
    """Raised when a homework assignment cannot be found."""

    def __init__(self, homework_id: str):
        super().__init__(
            message=f"Homework not found: {homework_id}",
            code="HOMEWORK_NOT_FOUND",
        )
        self.homework_id = homework_id
