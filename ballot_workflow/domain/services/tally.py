"""Tally engine: first-past-the-post over stored proposals."""

from __future__ import annotations

from collections.abc import Sequence

from ballot_workflow.domain.models.proposal import Proposal


def find_winning_proposal_id(proposals: Sequence[Proposal]) -> int | None:
    """Pick the proposal with the most votes.

    Proposals are scanned in ascending index order. A later proposal
    takes the lead only with strictly more votes than the current
    leader, so ties go to the lowest index. With no votes at all the
    first proposal wins.

    Args:
        proposals: All stored proposals, in index order.

    Returns:
        Index of the winning proposal, or None if there are no proposals.
    """
    if not proposals:
        return None

    winning_proposal_id = proposals[0].proposal_id
    winning_vote_count = proposals[0].vote_count
    for proposal in proposals[1:]:
        if proposal.vote_count > winning_vote_count:
            winning_vote_count = proposal.vote_count
            winning_proposal_id = proposal.proposal_id
    return winning_proposal_id
