"""Workflow phase errors for the voting state machine.

This module defines errors for operations attempted in the wrong phase
and for phase transitions that skip, repeat, or reverse a step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ballot_workflow.domain.exceptions import BallotWorkflowError

if TYPE_CHECKING:
    from ballot_workflow.domain.models.workflow_status import WorkflowStatus


class InvalidPhaseError(BallotWorkflowError):
    """Raised when an operation is not legal in the current phase.

    HTTP Status: 409 Conflict

    Attributes:
        current_status: Phase the election is in.
        required_status: Phase the operation is scoped to.
        operation: Name of the rejected operation.
    """

    def __init__(
        self,
        current_status: WorkflowStatus,
        required_status: WorkflowStatus,
        operation: str,
        message: str | None = None,
    ) -> None:
        """Initialize invalid phase error.

        Args:
            current_status: Phase the election is in.
            required_status: Phase the operation is scoped to.
            operation: Name of the rejected operation.
            message: Optional override of the default message.
        """
        self.current_status = current_status
        self.required_status = required_status
        self.operation = operation
        super().__init__(
            message
            or (
                f"{operation} requires phase {required_status.value}, "
                f"current phase is {current_status.value}"
            )
        )

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 problem details.
        """
        return {
            "type": "urn:ballot-workflow:workflow:invalid-phase",
            "title": "Invalid Phase",
            "status": 409,
            "detail": str(self),
            "operation": self.operation,
            "current_status": self.current_status.value,
            "required_status": self.required_status.value,
        }


class InvalidPhaseTransitionError(InvalidPhaseError):
    """Raised when a phase transition is not the next step forward.

    Every transition is legal exactly once, from its immediate
    predecessor. Skipping, repeating and going backward are all rejected.

    HTTP Status: 409 Conflict

    Attributes:
        from_status: Current phase of the election.
        to_status: Phase the caller tried to enter.
    """

    def __init__(
        self,
        from_status: WorkflowStatus,
        to_status: WorkflowStatus,
        required_status: WorkflowStatus,
        operation: str,
    ) -> None:
        """Initialize invalid phase transition error.

        Args:
            from_status: Current phase of the election.
            to_status: Attempted target phase.
            required_status: Predecessor phase the transition requires.
            operation: Name of the rejected transition.
        """
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            current_status=from_status,
            required_status=required_status,
            operation=operation,
            message=(
                f"Invalid workflow transition: {from_status.value} -> "
                f"{to_status.value}. {operation} requires phase "
                f"{required_status.value}"
            ),
        )

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 problem details.
        """
        result = super().to_rfc7807_dict()
        result.update(
            {
                "type": "urn:ballot-workflow:workflow:invalid-transition",
                "title": "Invalid Phase Transition",
                "from_status": self.from_status.value,
                "to_status": self.to_status.value,
            }
        )
        return result
