from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind
from proposal_intake.application.usecases.submit_proposal_usecase import SubmitProposalUseCase
from proposal_intake.infrastructure.entrypoints.api.dtos.proposal_submission_dto import (
    ProposalSubmissionDTO,
)
from proposal_intake.infrastructure.entrypoints.api.mappers.submission_response_mapper import (
    SubmissionResponseMapper,
)
from proposal_intake.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)
router = APIRouter()

SUBMIT_PATH = "/api/submit"


def get_usecase(request: Request) -> SubmitProposalUseCase:
    return request.app.state.submit_usecase


@router.post(SUBMIT_PATH)
async def submit_proposal(
    request: Request,
    usecase: SubmitProposalUseCase = Depends(get_usecase),
) -> JSONResponse:
    # Parsed by hand so malformed bodies get the generic 500 instead of FastAPI's 422
    body = await request.body()
    try:
        payload = ProposalSubmissionDTO.model_validate_json(body)
    except ValidationError as e:
        logger.error(
            "Failed to parse submission body",
            outcome=FailureKind.INTERNAL.value,
            error_type="ValidationError",
            error_details=[f"{'.'.join(map(str, err['loc']))}: {err['type']}" for err in e.errors()],
        )
        return SubmissionResponseMapper.internal_error()

    try:
        outcome = await usecase.execute(payload.to_domain())
    except Exception as e:
        logger.exception(
            "Error processing request",
            outcome=FailureKind.INTERNAL.value,
            error_type=type(e).__name__,
            error_details=str(e),
        )
        return SubmissionResponseMapper.internal_error()

    return SubmissionResponseMapper.to_response(outcome)
