"""Bootstrap wiring for voting workflow dependencies.

Holds the process-wide election, event emitter and service. The HTTP
app asks for these through the API dependency module; tests call
reset_voting_dependencies() to start from a fresh election.
"""

from __future__ import annotations

from dotenv import load_dotenv

from ballot_workflow.application.ports.election_repository import (
    ElectionRepositoryProtocol,
)
from ballot_workflow.application.services.voting_workflow_service import (
    VotingWorkflowService,
)
from ballot_workflow.config.voting_config import VotingConfig
from ballot_workflow.domain.models.election import Election
from ballot_workflow.infrastructure.stubs.election_repository_stub import (
    ElectionRepositoryStub,
)
from ballot_workflow.infrastructure.stubs.voting_event_emitter_stub import (
    VotingEventEmitterStub,
)

_voting_config: VotingConfig | None = None
_election_repository: ElectionRepositoryProtocol | None = None
_event_emitter: VotingEventEmitterStub | None = None
_voting_workflow_service: VotingWorkflowService | None = None


def load_voting_config() -> VotingConfig:
    """Load configuration from .env and the process environment."""
    load_dotenv()
    return VotingConfig.from_environment()


def create_election(config: VotingConfig) -> Election:
    """Build a new election from configuration."""
    return Election(
        administrator_id=config.administrator_id,
        seed_genesis_proposal=config.seed_genesis_proposal,
        genesis_description=config.genesis_description,
    )


def get_voting_config() -> VotingConfig:
    """Get the process-wide voting configuration."""
    global _voting_config
    if _voting_config is None:
        _voting_config = load_voting_config()
    return _voting_config


def get_election_repository() -> ElectionRepositoryProtocol:
    """Get the election repository instance."""
    global _election_repository
    if _election_repository is None:
        _election_repository = ElectionRepositoryStub(
            create_election(get_voting_config())
        )
    return _election_repository


def get_event_emitter() -> VotingEventEmitterStub:
    """Get the voting event emitter instance."""
    global _event_emitter
    if _event_emitter is None:
        _event_emitter = VotingEventEmitterStub()
    return _event_emitter


def get_voting_workflow_service() -> VotingWorkflowService:
    """Get the voting workflow service instance."""
    global _voting_workflow_service
    if _voting_workflow_service is None:
        _voting_workflow_service = VotingWorkflowService(
            repository=get_election_repository(),
            event_emitter=get_event_emitter(),
        )
    return _voting_workflow_service


def reset_voting_dependencies(config: VotingConfig | None = None) -> None:
    """Discard the current election and all wired instances.

    Args:
        config: Configuration for the next election. When None, it is
            loaded from the environment on next use.
    """
    global _voting_config, _election_repository, _event_emitter
    global _voting_workflow_service
    _voting_config = config
    _election_repository = None
    _event_emitter = None
    _voting_workflow_service = None


__all__ = [
    "create_election",
    "get_election_repository",
    "get_event_emitter",
    "get_voting_config",
    "get_voting_workflow_service",
    "load_voting_config",
    "reset_voting_dependencies",
]
