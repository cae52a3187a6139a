from .identity import AuthenticatedIdentity
from .viewer import ANONYMOUS, AnonymousViewer, AuthenticatedViewer, Viewer

__all__ = [
    "ANONYMOUS",
    "AnonymousViewer",
    "AuthenticatedIdentity",
    "AuthenticatedViewer",
    "Viewer",
]
