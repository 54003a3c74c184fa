"""In-memory adapters for the application ports.

- ElectionRepositoryStub: holds the single election in memory
- VotingEventEmitterStub: records events and forwards them to observers
"""

from ballot_workflow.infrastructure.stubs.election_repository_stub import (
    ElectionRepositoryStub,
)
from ballot_workflow.infrastructure.stubs.voting_event_emitter_stub import (
    VotingEventEmitterStub,
    VotingObserver,
)

__all__: list[str] = [
    "ElectionRepositoryStub",
    "VotingEventEmitterStub",
    "VotingObserver",
]
