"""Voting workflow configuration.

Defines who administers the election and how proposal indices start,
with environment variable overrides for deployment.

Environment Variables:
- VOTING_ADMINISTRATOR_ID: Administrator identity (default: "admin")
- VOTING_SEED_GENESIS_PROPOSAL: Seed GENESIS at index 0 (default: true)
- VOTING_GENESIS_DESCRIPTION: Text of the genesis proposal (default: "GENESIS")
- VOTING_ENVIRONMENT: "production" (JSON logs) or "development" (console logs)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ballot_workflow.domain.models.proposal import GENESIS_DESCRIPTION

DEFAULT_ADMINISTRATOR_ID = "admin"
VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable, ignoring blank values.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        The stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognized.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class VotingConfig:
    """Configuration for one election.

    Attributes:
        administrator_id: Identity allowed to register voters, advance
            phases and tally. Fixed for the lifetime of the election.
        seed_genesis_proposal: Whether opening proposal intake stores a
            genesis proposal at index 0. When False, voter proposals
            start at index 0.
        genesis_description: Text of the genesis proposal.
        environment: Logging environment, "production" or "development".
    """

    administrator_id: str = DEFAULT_ADMINISTRATOR_ID
    seed_genesis_proposal: bool = True
    genesis_description: str = GENESIS_DESCRIPTION
    environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.administrator_id or not self.administrator_id.strip():
            raise ValueError("administrator_id must not be empty")
        if self.seed_genesis_proposal and not self.genesis_description.strip():
            raise ValueError(
                "genesis_description must not be empty when seeding is enabled"
            )
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> VotingConfig:
        """Create config from environment variables with defaults.

        An unknown VOTING_ENVIRONMENT falls back to production.

        Returns:
            VotingConfig with values from environment or defaults.
        """
        environment = _get_str_env("VOTING_ENVIRONMENT", "production").lower()
        if environment not in VALID_ENVIRONMENTS:
            environment = "production"
        return cls(
            administrator_id=_get_str_env(
                "VOTING_ADMINISTRATOR_ID", DEFAULT_ADMINISTRATOR_ID
            ),
            seed_genesis_proposal=_get_bool_env("VOTING_SEED_GENESIS_PROPOSAL", True),
            genesis_description=_get_str_env(
                "VOTING_GENESIS_DESCRIPTION", GENESIS_DESCRIPTION
            ),
            environment=environment,
        )


# Default production config
DEFAULT_VOTING_CONFIG = VotingConfig()

# Testing config with a recognizable administrator and console logs
TEST_VOTING_CONFIG = VotingConfig(
    administrator_id="test-admin",
    environment="development",
)
