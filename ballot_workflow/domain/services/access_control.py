"""Access controller for the voting workflow.

Decides who may call what:
- Administrative operations (register voter, advance phase, tally)
  belong to the administrator identity fixed at construction.
- Voter operations (propose, vote, read records) belong to identities
  holding a Voter record. The administrator is not implicitly a voter
  and must register itself to take part.
"""

from __future__ import annotations

from collections.abc import Mapping

from ballot_workflow.domain.errors.access import (
    ROLE_ADMINISTRATOR,
    ROLE_VOTER,
    UnauthorizedError,
)
from ballot_workflow.domain.models.voter import Voter


class AccessController:
    """Checks caller roles before any phase or record check runs."""

    def __init__(self, administrator_id: str) -> None:
        """Initialize the controller.

        Args:
            administrator_id: The single identity allowed to administer
                the election.

        Raises:
            ValueError: If administrator_id is empty or blank.
        """
        if not administrator_id or not administrator_id.strip():
            raise ValueError("Administrator identity must not be empty")
        self._administrator_id = administrator_id

    @property
    def administrator_id(self) -> str:
        """Get the administrator identity."""
        return self._administrator_id

    def is_administrator(self, caller_id: str) -> bool:
        return caller_id == self._administrator_id

    def require_administrator(self, caller_id: str, operation: str) -> None:
        """Reject callers other than the administrator.

        Raises:
            UnauthorizedError: If caller_id is not the administrator.
        """
        if not self.is_administrator(caller_id):
            raise UnauthorizedError(
                caller_id=caller_id,
                required_role=ROLE_ADMINISTRATOR,
                operation=operation,
            )

    def require_voter(
        self, caller_id: str, voters: Mapping[str, Voter], operation: str
    ) -> Voter:
        """Reject callers without a Voter record.

        Args:
            caller_id: Identity invoking the operation.
            voters: Current voter registry.
            operation: Name of the operation, for diagnostics.

        Returns:
            The caller's Voter record.

        Raises:
            UnauthorizedError: If caller_id is not a registered voter.
        """
        voter = voters.get(caller_id)
        if voter is None or not voter.is_registered:
            raise UnauthorizedError(
                caller_id=caller_id,
                required_role=ROLE_VOTER,
                operation=operation,
            )
        return voter
