"""
Infrastructure layer - adapters for Ballot Workflow.

This layer contains:
- In-memory stubs implementing the application ports
- Observability (structlog configuration, correlation IDs)
"""
