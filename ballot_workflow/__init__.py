"""
Ballot Workflow - single-authority plurality voting

One administrator registers eligible voters, collects their proposals,
opens a voting round, and tallies a winner by plurality.

Guarantees:
- Phases advance strictly forward, one step at a time
- Every rejection is typed and leaves state untouched
- Every committed change is announced to observers
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
