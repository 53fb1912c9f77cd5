class DomainError(Exception):
    """
    Base class for all domain layer exceptions.
    Anything outside this hierarchy is treated as an unclassified failure.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
