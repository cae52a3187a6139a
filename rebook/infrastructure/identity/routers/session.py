import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from starlette import status

from rebook.application.identity.use_cases.viewer_session_use_case import ViewerSessionUseCase
from rebook.core import Container
from rebook.domain.identity.entities.identity import AuthenticatedIdentity
from rebook.domain.identity.entities.viewer import AuthenticatedViewer, Viewer
from rebook.infrastructure.board.schemas import ViewerSchema
from rebook.infrastructure.common.di import inject_use_case
from rebook.infrastructure.common.schemas import ErrorResponse, SuccessResponse
from rebook.infrastructure.identity.dependencies import (
    clear_viewer,
    get_authenticated_identity,
    get_viewer,
    store_viewer,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/session",
    response_model=ViewerSchema,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def open_session(
    request: Request,
    identity: Annotated[AuthenticatedIdentity, Depends(get_authenticated_identity)],
    use_case: ViewerSessionUseCase = Depends(inject_use_case(Container.viewer_session_use_case)),
) -> ViewerSchema:
    """
    Remember the bearer token's user as the page viewer.

    Server-rendered pages (the book detail page) read the viewer from the
    session cookie instead of an Authorization header.
    """
    viewer = use_case.open_session(identity)
    store_viewer(request, viewer)
    logger.info(f"Opened viewer session for user {viewer.id}")
    return ViewerSchema.from_viewer(viewer)


@router.get("/session", response_model=ViewerSchema | None, status_code=status.HTTP_200_OK)
def read_session(viewer: Annotated[Viewer, Depends(get_viewer)]) -> ViewerSchema | None:
    """Get the current viewer, or null for anonymous visitors."""
    if isinstance(viewer, AuthenticatedViewer):
        return ViewerSchema.from_viewer(viewer)
    return None


@router.delete("/session", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def close_session(request: Request) -> SuccessResponse:
    """Forget the viewer. Safe to call without a session."""
    clear_viewer(request)
    return SuccessResponse(success=True, message="Session closed")
