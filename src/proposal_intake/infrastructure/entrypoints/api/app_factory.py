from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from proposal_intake.application.ports.tracker_gateway import TrackerGateway
from proposal_intake.application.usecases.submit_proposal_usecase import SubmitProposalUseCase
from proposal_intake.infrastructure.configuration.main_settings import Settings
from proposal_intake.infrastructure.drivers.tracker.clients.jira_http_client import JiraHttpClient
from proposal_intake.infrastructure.drivers.tracker.jira_rest_adapter import JiraRestAdapter
from proposal_intake.infrastructure.drivers.tracker.mappers.jira_issue_mapper import JiraIssueMapper
from proposal_intake.infrastructure.entrypoints.api.cors_middleware import CorsMiddleware, CorsPolicy
from proposal_intake.infrastructure.entrypoints.api.mappers.submission_response_mapper import (
    SubmissionResponseMapper,
)
from proposal_intake.infrastructure.entrypoints.api.submission_router import router as submission_router
from proposal_intake.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from proposal_intake.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from proposal_intake.infrastructure.observability.metrics_service import expose_metrics
from proposal_intake.infrastructure.observability.redaction_service import redact_dict
from proposal_intake.infrastructure.observability.tracing_setup import configure_tracing

logger = get_logger(__name__)


def build_tracker(settings: Settings) -> TrackerGateway:
    return JiraRestAdapter(JiraHttpClient(settings), JiraIssueMapper(settings))


def create_app(settings: Settings, tracker: TrackerGateway | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    if settings.tracing_enabled:
        configure_tracing()

    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        settings=redact_dict(settings.model_dump(mode="json")),
    )

    usecase = SubmitProposalUseCase(
        tracker=tracker or build_tracker(settings),
        identity_check=settings.jira_identity_check,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if settings.metrics_port:
            expose_metrics(settings.metrics_port)
        yield

    # Only POST /api/submit is served; docs routes would widen that surface
    app = FastAPI(
        title=settings.app_name,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.submit_usecase = usecase

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        logger.info("Unmatched route", http_status=exc.status_code)
        return SubmissionResponseMapper.not_found()

    app.include_router(submission_router)

    # Last added runs first: correlation wraps CORS
    app.add_middleware(CorsMiddleware, policy=CorsPolicy.from_settings(settings))
    app.add_middleware(CorrelationMiddleware)

    return app
