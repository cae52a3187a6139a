from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from rebook.application.board.use_cases.book_detail_use_case import BookDetailUseCase
from rebook.application.board.use_cases.book_list_use_case import BookListUseCase
from rebook.application.board.use_cases.review_list_use_case import ReviewListUseCase
from rebook.application.identity.use_cases.viewer_session_use_case import ViewerSessionUseCase
from rebook.infrastructure.board.repositories.book_repository import BookRepository
from rebook.infrastructure.board.repositories.like_repository import LikeRepository
from rebook.infrastructure.board.repositories.review_repository import ReviewRepository
from rebook.infrastructure.identity.repositories.user_repository import UserRepository
from rebook.infrastructure.identity.services.token_service import TokenVerifier


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    review_repository = providers.Factory(ReviewRepository, db=db)
    like_repository = providers.Factory(LikeRepository, db=db)
    user_repository = providers.Factory(UserRepository, db=db)

    # Identity services
    token_verifier = providers.Singleton(TokenVerifier)

    # Board use cases
    book_list_use_case = providers.Factory(
        BookListUseCase,
        book_repository=book_repository,
    )
    book_detail_use_case = providers.Factory(
        BookDetailUseCase,
        book_repository=book_repository,
        like_repository=like_repository,
    )
    review_list_use_case = providers.Factory(
        ReviewListUseCase,
        review_repository=review_repository,
    )

    # Identity use cases
    viewer_session_use_case = providers.Factory(
        ViewerSessionUseCase,
        user_repository=user_repository,
    )


# Initialize container
container = Container()
