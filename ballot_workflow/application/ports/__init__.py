"""Application ports for Ballot Workflow.

Abstract interfaces implemented by infrastructure adapters:
- ElectionRepositoryProtocol: election persistence
- VotingEventEmitterProtocol: notification delivery
"""

from ballot_workflow.application.ports.election_repository import (
    ElectionRepositoryProtocol,
)
from ballot_workflow.application.ports.voting_event_emitter import (
    VotingEventEmitterProtocol,
)

__all__: list[str] = [
    "ElectionRepositoryProtocol",
    "VotingEventEmitterProtocol",
]
