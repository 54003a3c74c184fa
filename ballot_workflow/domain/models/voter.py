"""Voter domain model.

A Voter record is created when the administrator registers an identity
and is never deleted. The only later change is the voter's own vote,
which flips has_voted once and records the chosen proposal.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, eq=True)
class Voter:
    """A participant identity in the election.

    Attributes:
        voter_id: Unique voter identity (address or principal).
        is_registered: Whether the administrator registered this identity.
        has_voted: Whether the voter has cast their vote. Monotonic.
        voted_proposal_id: Proposal index voted for. Meaningful only
            when has_voted is True.
    """

    voter_id: str
    is_registered: bool = field(default=False)
    has_voted: bool = field(default=False)
    voted_proposal_id: int = field(default=0)

    @classmethod
    def registered(cls, voter_id: str) -> Voter:
        """Create a freshly registered voter who has not voted."""
        return cls(voter_id=voter_id, is_registered=True)

    @classmethod
    def unregistered(cls, voter_id: str) -> Voter:
        """Create the empty record returned for an unknown identity."""
        return cls(voter_id=voter_id)

    def with_vote(self, proposal_id: int) -> Voter:
        """Create new voter marked as having voted for a proposal.

        Since Voter is frozen, returns new instance.

        Args:
            proposal_id: Index of the proposal voted for.

        Returns:
            New Voter with has_voted=True and voted_proposal_id set.

        Raises:
            ValueError: If the voter already voted.
        """
        if self.has_voted:
            raise ValueError(f"Voter {self.voter_id} has already voted")
        return Voter(
            voter_id=self.voter_id,
            is_registered=self.is_registered,
            has_voted=True,
            voted_proposal_id=proposal_id,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize for API responses and storage."""
        return {
            "voter_id": self.voter_id,
            "is_registered": self.is_registered,
            "has_voted": self.has_voted,
            "voted_proposal_id": self.voted_proposal_id,
        }
