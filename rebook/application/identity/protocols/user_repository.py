from typing import Protocol

from rebook.domain.common.value_objects.ids import UserId


class UserRepositoryProtocol(Protocol):
    def find_display_name(self, user_id: UserId) -> str | None: ...
