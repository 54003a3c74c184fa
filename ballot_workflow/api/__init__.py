"""
API layer - HTTP facade for Ballot Workflow.

FastAPI application exposing the voting workflow operations. The
caller identity is read from the X-Voter-Id header.
"""
