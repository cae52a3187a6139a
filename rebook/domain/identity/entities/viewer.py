"""
Who is looking at a page.

Pages that tolerate anonymous readers receive a ``Viewer`` instead of an
optional user id, and branch on the variant.
"""

from dataclasses import dataclass

from rebook.domain.common.value_object import ValueObject
from rebook.domain.common.value_objects.ids import UserId


@dataclass(frozen=True)
class AnonymousViewer(ValueObject):
    """Viewer without a login session."""


@dataclass(frozen=True)
class AuthenticatedViewer(ValueObject):
    """Viewer with a login session."""

    id: UserId
    name: str | None = None


Viewer = AnonymousViewer | AuthenticatedViewer

ANONYMOUS = AnonymousViewer()
