"""FastAPI application entry point for Ballot Workflow."""

from fastapi import FastAPI

from ballot_workflow import __version__
from ballot_workflow.api.middleware.logging_middleware import LoggingMiddleware
from ballot_workflow.api.routes.voting import router as voting_router
from ballot_workflow.bootstrap.logging import configure_structlog
from ballot_workflow.bootstrap.voting import get_voting_config


def create_app() -> FastAPI:
    """Build the application, configuring logging from VotingConfig."""
    configure_structlog(get_voting_config().environment)

    application = FastAPI(
        title="Ballot Workflow API",
        description="Single-authority plurality voting workflow",
        version=__version__,
    )
    application.add_middleware(LoggingMiddleware)
    application.include_router(voting_router)
    return application


app = create_app()
