"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """A request field is outside its allowed domain"""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InfeasibleGoalError(DomainException):
    """No plan within the search bounds reaches the goal"""

    pass


class AllocationTableError(DomainException):
    """Allocation policy table is malformed"""

    pass
