"""Domain services for Ballot Workflow.

Stateless rules shared by the Election aggregate:
- AccessController: administrator and voter role checks
- find_winning_proposal_id: plurality tally with lowest-index tie-break
"""

from ballot_workflow.domain.services.access_control import AccessController
from ballot_workflow.domain.services.tally import find_winning_proposal_id

__all__: list[str] = ["AccessController", "find_winning_proposal_id"]
