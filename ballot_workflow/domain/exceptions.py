"""Base exception classes for the Ballot Workflow domain layer."""


class BallotWorkflowError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the service and API
    layers: a caller can catch BallotWorkflowError to handle any
    rejected voting operation.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
