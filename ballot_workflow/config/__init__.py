"""Configuration module for Ballot Workflow.

Available Configurations:
- VotingConfig: administrator identity, genesis seeding, log environment
"""

from ballot_workflow.config.voting_config import (
    DEFAULT_VOTING_CONFIG,
    TEST_VOTING_CONFIG,
    VotingConfig,
)

__all__ = [
    "VotingConfig",
    "DEFAULT_VOTING_CONFIG",
    "TEST_VOTING_CONFIG",
]
