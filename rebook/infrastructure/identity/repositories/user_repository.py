"""Repository for reading user profile data."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from rebook.domain.common.value_objects.ids import UserId
from rebook.models import User as UserORM


class UserRepository:
    """Read-only access to users managed by the login service."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_display_name(self, user_id: UserId) -> str | None:
        """
        Find a user's display name.

        Args:
            user_id: The user ID

        Returns:
            The name if the user exists, None otherwise
        """
        stmt = select(UserORM.name).where(UserORM.id == user_id.value)
        return self.db.execute(stmt).scalar_one_or_none()
