"""
Pytest configuration and shared fixtures for Ballot Workflow tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from ballot_workflow.domain.models.election import Election
from ballot_workflow.infrastructure.stubs.election_repository_stub import (
    ElectionRepositoryStub,
)
from ballot_workflow.infrastructure.stubs.voting_event_emitter_stub import (
    VotingEventEmitterStub,
)

ADMIN = "admin"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballot_workflow import __version__

    return __version__


@pytest.fixture
def election() -> Election:
    """Fresh election administered by "admin", genesis seeding on."""
    return Election(administrator_id=ADMIN)


@pytest.fixture
def election_repository(election: Election) -> ElectionRepositoryStub:
    """Repository stub holding the fresh election."""
    return ElectionRepositoryStub(election)


@pytest.fixture
def event_emitter() -> VotingEventEmitterStub:
    """Create fresh event emitter stub for each test."""
    return VotingEventEmitterStub()
