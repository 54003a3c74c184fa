"""In-memory election repository.

Holds the single Election aggregate in process memory. Used by the
HTTP app (state lives as long as the process) and by tests.

Usage in tests:
    repository = ElectionRepositoryStub(Election(administrator_id="admin"))
    service = VotingWorkflowService(repository=repository, event_emitter=...)

    await service.add_voter("admin", "alice")

    assert repository.save_count == 1
"""

from __future__ import annotations

from ballot_workflow.application.ports.election_repository import (
    ElectionRepositoryProtocol,
)
from ballot_workflow.domain.models.election import Election


class ElectionRepositoryStub(ElectionRepositoryProtocol):
    """In-memory implementation of ElectionRepositoryProtocol.

    Attributes:
        save_count: Number of commits, for test assertions.
    """

    def __init__(self, election: Election) -> None:
        """Initialize the repository with its election.

        Args:
            election: The election this repository owns.
        """
        self._election = election
        self.save_count: int = 0

    async def get_election(self) -> Election:
        return self._election

    async def save_election(self, election: Election) -> None:
        """Commit the election, replacing the previously stored state.

        Raises:
            ValueError: If the election belongs to another administrator;
                this store holds a single election.
        """
        if election.administrator_id != self._election.administrator_id:
            raise ValueError("ElectionRepositoryStub holds a single election")
        self._election = election
        self.save_count += 1
