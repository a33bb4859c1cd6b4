"""
Upload authorization endpoint
"""
from fastapi import APIRouter, status

from app.api.deps import RequestIdDep, UploadServiceDep
from app.core.exceptions import ErrorResponse
from app.core.logging import log
from app.schemas.upload import PresignRequest, PresignResponse


router = APIRouter()


@router.post(
    "/presign",
    response_model=PresignResponse,
    summary="Authorize an upload",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    }
)
async def presign_upload(
    presign_in: PresignRequest,
    upload_service: UploadServiceDep,
    request_id: RequestIdDep
) -> PresignResponse:
    """
    Issue a one-hour presigned POST for a single object (5 MB max).

    The browser posts `fields` plus the file to `url`, then stores `publicUrl`
    on the brand, model or variant.
    """
    log.info("Presigning upload", request_id=request_id, filename=presign_in.filename, folder=presign_in.folder)

    return upload_service.create_presigned_post(presign_in)
