"""Proposal domain model.

Proposals are identified by their 0-based index in submission order.
When genesis seeding is enabled, index 0 holds the GENESIS proposal
created by the opening of proposal intake, so the first voter proposal
gets index 1. The genesis proposal can be read but not voted for.
"""

from __future__ import annotations

from dataclasses import dataclass, field

GENESIS_DESCRIPTION: str = "GENESIS"


@dataclass(frozen=True, eq=True)
class Proposal:
    """A submitted option accumulating votes.

    Attributes:
        proposal_id: Sequential 0-based index.
        description: Non-empty proposal text.
        vote_count: Number of votes received (non-negative).
        is_genesis: True only for the seeded genesis proposal.
    """

    proposal_id: int
    description: str
    vote_count: int = field(default=0)
    is_genesis: bool = field(default=False)

    def __post_init__(self) -> None:
        """Validate proposal fields."""
        if self.proposal_id < 0:
            raise ValueError("Proposal index must be non-negative")
        if self.vote_count < 0:
            raise ValueError("Proposal vote count must be non-negative")

    @classmethod
    def genesis(cls, description: str = GENESIS_DESCRIPTION) -> Proposal:
        """Create the genesis proposal at index 0."""
        return cls(proposal_id=0, description=description, is_genesis=True)

    def with_vote_counted(self) -> Proposal:
        """Create new proposal with one more vote.

        Returns:
            New Proposal with vote_count incremented by one.
        """
        return Proposal(
            proposal_id=self.proposal_id,
            description=self.description,
            vote_count=self.vote_count + 1,
            is_genesis=self.is_genesis,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize for API responses and storage."""
        return {
            "proposal_id": self.proposal_id,
            "description": self.description,
            "vote_count": self.vote_count,
            "is_genesis": self.is_genesis,
        }
