"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidExpenseDataError(DomainException):
    """Expense entry is missing a type or has a non-positive amount"""

    pass


class ExpenseLimitExceededError(DomainException):
    """Request carries more expenses than the service accepts"""

    def __init__(self, count: int, limit: int):
        super().__init__(f"{count} expenses submitted, limit is {limit}")
        self.count = count
        self.limit = limit
