from dataclasses import dataclass
from datetime import datetime

from rebook.domain.common.value_object import ValueObject
from rebook.domain.common.value_objects.ids import UserId


@dataclass(frozen=True)
class AuthenticatedIdentity(ValueObject):
    """Caller identity taken from a verified access token. Lives for one request."""

    user_id: UserId
    expires_at: datetime | None = None
