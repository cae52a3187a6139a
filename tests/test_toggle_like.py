"""Tests for POST /board/detail/{id}/toggle-like."""

from collections.abc import Callable, Generator
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from pathlib import Path

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from httpx import Response
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rebook import models
from rebook.config import Settings
from rebook.database import get_engine
from rebook.main import create_app


def _like_rows(db_session: Session, book_id: str) -> int:
    stmt = select(func.count(models.BookLike.id)).where(models.BookLike.book_id == book_id)
    return db_session.execute(stmt).scalar() or 0


class TestToggleLike:
    """Test suite for toggling a like with a valid token."""

    def test_like_then_unlike(
        self,
        client: TestClient,
        test_book: models.Book,
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        url = f"/board/detail/{test_book.id}/toggle-like"

        first = client.post(url, headers=auth_header("u1"))
        second = client.post(url, headers=auth_header("u1"))

        assert first.status_code == status.HTTP_200_OK
        assert first.json() == {
            "success": True,
            "message": "Like toggled",
            "isLiked": True,
            "likeCount": 1,
        }
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["isLiked"] is False
        assert second.json()["likeCount"] == 0

    def test_double_toggle_restores_existing_like(
        self,
        client: TestClient,
        db_session: Session,
        catalog: list[models.Book],
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        url = "/board/detail/b-b/toggle-like"

        removed = client.post(url, headers=auth_header("u2")).json()
        restored = client.post(url, headers=auth_header("u2")).json()

        assert removed["isLiked"] is False
        assert removed["likeCount"] == 2
        assert restored["isLiked"] is True
        assert restored["likeCount"] == 3
        assert _like_rows(db_session, "b-b") == 3

    def test_like_count_counts_distinct_users(
        self,
        client: TestClient,
        test_book: models.Book,
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        url = f"/board/detail/{test_book.id}/toggle-like"
        counts = [
            client.post(url, headers=auth_header(user_id)).json()["likeCount"]
            for user_id in ["u1", "u2", "u3"]
        ]

        detail = client.get(f"/board/detail/{test_book.id}").json()
        listing = client.get("/board/list").json()

        assert counts == [1, 2, 3]
        assert detail["likeCount"] == 3
        assert listing["books"][0]["likeCount"] == 3

    def test_toggle_does_not_touch_other_books(
        self,
        client: TestClient,
        db_session: Session,
        catalog: list[models.Book],
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        client.post("/board/detail/b-a/toggle-like", headers=auth_header("u1"))

        assert _like_rows(db_session, "b-a") == 1
        assert _like_rows(db_session, "b-b") == 3
        assert _like_rows(db_session, "b-c") == 1

    def test_detail_reflects_toggle_for_session_viewer(
        self,
        client: TestClient,
        test_book: models.Book,
        test_user: models.User,
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        client.post("/auth/session", headers=auth_header(test_user.id))
        client.post(f"/board/detail/{test_book.id}/toggle-like", headers=auth_header("u1"))

        data = client.get(f"/board/detail/{test_book.id}").json()

        assert data["isLiked"] is True
        assert data["likeCount"] == 1

    def test_unknown_book(
        self,
        client: TestClient,
        db_session: Session,
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        response = client.post("/board/detail/missing-book/toggle-like", headers=auth_header("u1"))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Book with id missing-book not found"}
        assert _like_rows(db_session, "missing-book") == 0


class TestToggleLikeAuthorization:
    """Test suite for rejected toggle requests."""

    def test_missing_header(
        self, client: TestClient, db_session: Session, test_book: models.Book
    ) -> None:
        response = client.post(f"/board/detail/{test_book.id}/toggle-like")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Authorization header is missing or malformed"}
        assert _like_rows(db_session, test_book.id) == 0

    @pytest.mark.parametrize("header", ["Basic dTE6cGFzc3dvcmQ=", "bearer abc", "Token abc"])
    def test_non_bearer_scheme(
        self, client: TestClient, db_session: Session, test_book: models.Book, header: str
    ) -> None:
        response = client.post(
            f"/board/detail/{test_book.id}/toggle-like", headers={"Authorization": header}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert _like_rows(db_session, test_book.id) == 0

    def test_expired_token(
        self,
        client: TestClient,
        db_session: Session,
        test_book: models.Book,
        make_token: Callable[..., str],
    ) -> None:
        token = make_token("u1", expires_in=timedelta(minutes=-5))

        response = client.post(
            f"/board/detail/{test_book.id}/toggle-like",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Token has expired"}
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert _like_rows(db_session, test_book.id) == 0

    def test_unsupported_algorithm(
        self,
        client: TestClient,
        db_session: Session,
        test_book: models.Book,
        make_token: Callable[..., str],
    ) -> None:
        token = make_token("u1", algorithm="HS512")

        response = client.post(
            f"/board/detail/{test_book.id}/toggle-like",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Unsupported token format"}
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert _like_rows(db_session, test_book.id) == 0

    def test_wrong_signature(
        self,
        client: TestClient,
        db_session: Session,
        test_book: models.Book,
        make_token: Callable[..., str],
    ) -> None:
        token = make_token("u1", secret="some-other-secret-that-is-long-enough")

        response = client.post(
            f"/board/detail/{test_book.id}/toggle-like",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Token is invalid or expired"}
        assert _like_rows(db_session, test_book.id) == 0

    @pytest.mark.parametrize("token", ["not-a-jwt", "a.b.c"])
    def test_garbage_token(self, client: TestClient, test_book: models.Book, token: str) -> None:
        response = client.post(
            f"/board/detail/{test_book.id}/toggle-like",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Token is invalid or expired"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_refresh_token_rejected(
        self,
        client: TestClient,
        test_book: models.Book,
        make_token: Callable[..., str],
    ) -> None:
        token = make_token("u1", token_type="refresh")

        response = client.post(
            f"/board/detail/{test_book.id}/toggle-like",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"detail": "Token is invalid or expired"}

    def test_session_alone_is_not_enough(
        self,
        client: TestClient,
        db_session: Session,
        test_book: models.Book,
        auth_header: Callable[[str], dict[str, str]],
    ) -> None:
        """Test that toggling needs a bearer token even with a viewer session."""
        client.post("/auth/session", headers=auth_header("u1"))

        response = client.post(f"/board/detail/{test_book.id}/toggle-like")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert _like_rows(db_session, test_book.id) == 0


@pytest.fixture
def file_backed_client(tmp_path: Path) -> Generator[TestClient, None, None]:
    """App on a SQLite file with its own engine and no session override."""
    settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'board.db'}")

    with TestClient(create_app(settings)) as test_client:
        with Session(get_engine()) as db:
            db.add(models.Book(id="b1", name="Java Concurrency in Practice"))
            db.commit()
        yield test_client


def _stored_likes(book_id: str) -> int:
    with Session(get_engine()) as db:
        return _like_rows(db, book_id)


class TestConcurrentToggles:
    """Test suite for toggles racing on the same book."""

    def test_parallel_likes_each_counted_once(
        self, file_backed_client: TestClient, make_token: Callable[..., str]
    ) -> None:
        user_ids = [f"reader-{i:02d}" for i in range(40)]
        headers = {uid: {"Authorization": f"Bearer {make_token(uid)}"} for uid in user_ids}

        def toggle(user_id: str) -> Response:
            return file_backed_client.post("/board/detail/b1/toggle-like", headers=headers[user_id])

        with ThreadPoolExecutor(max_workers=16) as pool:
            responses = list(pool.map(toggle, user_ids))

        assert [r.status_code for r in responses] == [status.HTTP_200_OK] * len(user_ids)
        assert all(r.json()["isLiked"] for r in responses)
        assert sorted(r.json()["likeCount"] for r in responses) == list(
            range(1, len(user_ids) + 1)
        )
        assert _stored_likes("b1") == len(user_ids)
        assert file_backed_client.get("/board/detail/b1").json()["likeCount"] == len(user_ids)

    def test_parallel_double_toggles_leave_no_likes(
        self, file_backed_client: TestClient, make_token: Callable[..., str]
    ) -> None:
        """Test that each user toggling twice at once ends unliked without conflicts."""
        user_ids = [f"reader-{i:02d}" for i in range(20)]
        headers = {uid: {"Authorization": f"Bearer {make_token(uid)}"} for uid in user_ids}

        def toggle(user_id: str) -> Response:
            return file_backed_client.post("/board/detail/b1/toggle-like", headers=headers[user_id])

        with ThreadPoolExecutor(max_workers=16) as pool:
            responses = list(pool.map(toggle, user_ids * 2))

        assert {r.status_code for r in responses} == {status.HTTP_200_OK}
        by_user: dict[str, list[bool]] = {}
        for user_id, response in zip(user_ids * 2, responses, strict=True):
            by_user.setdefault(user_id, []).append(response.json()["isLiked"])
        assert all(sorted(states) == [False, True] for states in by_user.values())
        assert _stored_likes("b1") == 0
