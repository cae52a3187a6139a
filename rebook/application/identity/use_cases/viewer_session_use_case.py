"""Use case for turning a verified token into a page-viewer session."""

import structlog

from rebook.application.identity.protocols.user_repository import UserRepositoryProtocol
from rebook.domain.identity.entities.identity import AuthenticatedIdentity
from rebook.domain.identity.entities.viewer import AuthenticatedViewer

logger = structlog.get_logger(__name__)


class ViewerSessionUseCase:
    """Builds the viewer stored in the login session."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def open_session(self, identity: AuthenticatedIdentity) -> AuthenticatedViewer:
        """
        Resolve the viewer for a verified identity.

        Users unknown to this service still get a session; they are shown
        without a display name.
        """
        name = self.user_repository.find_display_name(identity.user_id)
        if name is None:
            logger.info("viewer_session_unknown_user", user_id=str(identity.user_id))
        return AuthenticatedViewer(id=identity.user_id, name=name)
