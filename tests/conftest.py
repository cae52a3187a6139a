"""Pytest configuration and fixtures."""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-for-rebook-board-tests"
os.environ["SESSION_SECRET_KEY"] = "test-session-secret"
os.environ["COOKIE_SECURE"] = "false"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from rebook import models  # noqa: E402
from rebook.database import Base, get_db  # noqa: E402
from rebook.main import app  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]

# Test database URL (in-memory SQLite shared by every connection)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Build signed access tokens, including deliberately broken ones."""

    def _make_token(
        user_id: str,
        expires_in: timedelta = timedelta(minutes=15),
        algorithm: str = "HS256",
        secret: str = TEST_SECRET_KEY,
        token_type: str = "access",
    ) -> str:
        payload = {"sub": user_id, "exp": datetime.now(UTC) + expires_in, "type": token_type}
        return jwt.encode(payload, secret, algorithm=algorithm)

    return _make_token


@pytest.fixture
def auth_header(make_token: Callable[..., str]) -> Callable[[str], dict[str, str]]:
    """Authorization header carrying a valid token for the given user."""

    def _auth_header(user_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _auth_header


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a test user."""
    user = models.User(id="u1", email="reader@example.com", name="Reader One")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_book(db_session: Session) -> models.Book:
    """Create a test book with no likes and no reviews."""
    book = models.Book(
        id="b1",
        name="The Pragmatic Programmer",
        writer="Andrew Hunt",
        publisher="Addison-Wesley",
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def catalog(db_session: Session) -> list[models.Book]:
    """
    Five books with distinct like counts, review counts and ratings.

    likes:   b-a 0, b-b 3, b-c 1, b-d 2, b-e 0
    reviews: b-a 2, b-b 0, b-c 3, b-d 1, b-e 0
    rating:  b-a 4.5, b-b 0, b-c 2.0, b-d 5.0, b-e 0
    """
    books = [
        models.Book(id="b-a", name="Python Tricks", writer="Dan Bader"),
        models.Book(id="b-b", name="Fluent Python", writer="Luciano Ramalho"),
        models.Book(id="b-c", name="Effective Java", writer="Joshua Bloch"),
        models.Book(id="b-d", name="Python Cookbook", writer="David Beazley"),
        models.Book(id="b-e", name="Clean Code", writer="Robert Martin"),
    ]
    db_session.add_all(books)

    likes = {"b-b": ["u1", "u2", "u3"], "b-c": ["u1"], "b-d": ["u1", "u2"]}
    for book_id, user_ids in likes.items():
        db_session.add_all(models.BookLike(book_id=book_id, user_id=uid) for uid in user_ids)

    base = datetime(2024, 1, 1, tzinfo=UTC)
    reviews = {"b-a": [4, 5], "b-c": [1, 2, 3], "b-d": [5]}
    for book_id, ratings in reviews.items():
        db_session.add_all(
            models.Review(
                book_id=book_id,
                user_id=f"u{i}",
                content=f"Review {i} of {book_id}",
                rating=rating,
                created_at=base + timedelta(days=i),
            )
            for i, rating in enumerate(ratings, start=1)
        )

    db_session.commit()
    return books
