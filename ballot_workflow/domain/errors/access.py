"""Access control errors for the voting workflow.

Administrative operations belong to the administrator identity fixed at
construction. Voter-scoped operations belong to registered voters.
Any other caller is rejected before the phase is even looked at.
"""

from __future__ import annotations

from ballot_workflow.domain.exceptions import BallotWorkflowError

ROLE_ADMINISTRATOR: str = "administrator"
ROLE_VOTER: str = "voter"


class UnauthorizedError(BallotWorkflowError):
    """Raised when the caller lacks the role an operation requires.

    HTTP Status: 403 Forbidden

    Attributes:
        caller_id: Identity that attempted the operation.
        required_role: "administrator" or "voter".
        operation: Name of the rejected operation.
    """

    def __init__(self, caller_id: str, required_role: str, operation: str) -> None:
        """Initialize the error.

        Args:
            caller_id: Identity that attempted the operation.
            required_role: Role the operation requires.
            operation: Name of the rejected operation.
        """
        self.caller_id = caller_id
        self.required_role = required_role
        self.operation = operation
        super().__init__(
            f"Caller {caller_id!r} is not authorized for {operation}: "
            f"{required_role} role required"
        )

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 problem details.
        """
        return {
            "type": "urn:ballot-workflow:access:unauthorized",
            "title": "Unauthorized",
            "status": 403,
            "detail": str(self),
            "caller_id": self.caller_id,
            "required_role": self.required_role,
            "operation": self.operation,
        }
