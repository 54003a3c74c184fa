"""
Application layer - use cases and orchestration for Ballot Workflow.

This layer contains:
- Ports (abstract interfaces for persistence and event delivery)
- Application services (VotingWorkflowService)

Depends on the domain layer only; adapters are injected.
"""
