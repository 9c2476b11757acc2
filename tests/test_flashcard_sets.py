"""Tests for flashcard set API endpoints."""

from collections.abc import Callable
from datetime import timedelta
from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from flashdeck import models
from flashdeck.infrastructure.identity.auth.token_service import create_access_token

CreateSet = Callable[..., dict[str, Any]]


class TestAuthentication:
    """Test suite for requests without a valid identity."""

    def test_missing_token(self, client: TestClient) -> None:
        """Test requests without a token are rejected."""
        response = client.get("/api/v1/sets")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["kind"] == "Unauthenticated"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client: TestClient) -> None:
        """Test a token that does not verify is rejected."""
        response = client.get("/api/v1/sets", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_expired_token(self, client: TestClient) -> None:
        """Test an expired token is rejected."""
        token = create_access_token(1, expires_in=timedelta(seconds=-1))
        response = client.get("/api/v1/sets", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_user_id_out_of_range(self, client: TestClient) -> None:
        """Test a subject too large for a user id is rejected."""
        token = create_access_token(2**63)
        response = client.get("/api/v1/sets", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["kind"] == "Unauthenticated"


class TestCreateFlashcardSet:
    """Test suite for POST /sets endpoint."""

    def test_create_with_cards(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        """Test successful creation of a set with initial cards."""
        response = client.post(
            "/api/v1/sets",
            json={
                "title": "  Spanish Basics ",
                "description": "Everyday words",
                "category": "Languages",
                "tags": ["spanish", "a1", "spanish"],
                "isPublic": True,
                "cards": [
                    {"question": "Hola", "answer": "Hello"},
                    {"question": "Adiós", "answer": "Goodbye"},
                ],
            },
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        flashcard_set = data["flashcardSet"]
        assert flashcard_set["title"] == "Spanish Basics"
        assert flashcard_set["description"] == "Everyday words"
        assert flashcard_set["category"] == "Languages"
        assert flashcard_set["tags"] == ["spanish", "a1"]
        assert flashcard_set["isPublic"] is True
        assert flashcard_set["cardCount"] == 2
        assert flashcard_set["totalReviews"] == 0
        assert flashcard_set["averageScore"] == 0
        assert [c["question"] for c in flashcard_set["cards"]] == ["Hola", "Adiós"]
        assert all(c["isCorrect"] is None for c in flashcard_set["cards"])
        assert all(c["lastReviewed"] is None for c in flashcard_set["cards"])
        assert all(c["reviewCount"] == 0 for c in flashcard_set["cards"])

        db_set = db_session.scalar(
            select(models.FlashcardSet).where(models.FlashcardSet.id == flashcard_set["id"])
        )
        assert db_set is not None
        assert db_set.owner_id == 1
        assert len(db_set.cards) == 2

    def test_create_defaults(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test optional fields get their defaults."""
        response = client.post("/api/v1/sets", json={"title": "Verbs"}, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        flashcard_set = response.json()["flashcardSet"]
        assert flashcard_set["description"] == ""
        assert flashcard_set["category"] == "General"
        assert flashcard_set["tags"] == []
        assert flashcard_set["isPublic"] is False
        assert flashcard_set["cards"] == []

    def test_create_empty_title(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a blank title is rejected."""
        response = client.post("/api/v1/sets", json={"title": "   "}, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["kind"] == "InvalidInput"

    def test_create_title_too_long(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a title over 100 characters is rejected."""
        response = client.post("/api/v1/sets", json={"title": "x" * 101}, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_tag_too_long(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a tag over 20 characters is rejected."""
        response = client.post(
            "/api/v1/sets", json={"title": "T", "tags": ["t" * 21]}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_with_invalid_card(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        """Test one invalid initial card rejects the whole set."""
        response = client.post(
            "/api/v1/sets",
            json={"title": "T", "cards": [{"question": "Q", "answer": "A"}, {"question": "Q"}]},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert db_session.scalars(select(models.FlashcardSet)).all() == []


class TestListFlashcardSets:
    """Test suite for GET /sets and GET /sets/public endpoints."""

    def test_list_only_own_sets(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
        create_set: CreateSet,
    ) -> None:
        """Test the owner list holds only the caller's sets, newest update first."""
        create_set(title="First")
        create_set(title="Second")
        create_set(headers=other_auth_headers, title="Not mine")

        response = client.get("/api/v1/sets", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        sets = response.json()["sets"]
        assert [s["title"] for s in sets] == ["Second", "First"]
        assert "cards" not in sets[0]
        assert "ownerId" not in sets[0]

    def test_list_empty(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a user without sets gets an empty list."""
        response = client.get("/api/v1/sets", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"sets": []}

    def test_list_public(
        self,
        client: TestClient,
        other_auth_headers: dict[str, str],
        create_set: CreateSet,
    ) -> None:
        """Test public sets of every owner are listed, newest first."""
        create_set(title="Public one", isPublic=True)
        create_set(title="Private")
        create_set(headers=other_auth_headers, title="Public two", isPublic=True)

        response = client.get("/api/v1/sets/public", headers=other_auth_headers)

        assert response.status_code == status.HTTP_200_OK
        sets = response.json()["sets"]
        assert [s["title"] for s in sets] == ["Public two", "Public one"]
        assert [s["ownerId"] for s in sets] == [2, 1]


class TestGetFlashcardSet:
    """Test suite for GET /sets/:id endpoint."""

    def test_get_own_set(
        self, client: TestClient, auth_headers: dict[str, str], create_set: CreateSet
    ) -> None:
        """Test the owner can open a set with its cards."""
        created = create_set(cards=[{"question": "Q", "answer": "A"}])

        response = client.get(f"/api/v1/sets/{created['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        flashcard_set = response.json()["flashcardSet"]
        assert flashcard_set["id"] == created["id"]
        assert flashcard_set["cards"][0]["id"] == created["cards"][0]["id"]

    def test_get_missing_set(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test opening a missing set returns 404."""
        response = client.get("/api/v1/sets/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["kind"] == "NotFound"

    def test_get_other_users_public_set(
        self, client: TestClient, other_auth_headers: dict[str, str], create_set: CreateSet
    ) -> None:
        """Test public sets still cannot be opened by other users."""
        created = create_set(isPublic=True)

        response = client.get(f"/api/v1/sets/{created['id']}", headers=other_auth_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["kind"] == "Forbidden"

    def test_get_invalid_id(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a non-numeric set id is rejected."""
        response = client.get("/api/v1/sets/abc", headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_get_id_out_of_range(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test a set id too large for the id column is rejected."""
        response = client.get("/api/v1/sets/99999999999999999999", headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["kind"] == "InvalidInput"

    def test_get_largest_id(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test the largest storable set id is looked up normally."""
        response = client.get(f"/api/v1/sets/{2**31 - 1}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateFlashcardSet:
    """Test suite for PUT /sets/:id endpoint."""

    def test_update_given_fields(
        self, client: TestClient, auth_headers: dict[str, str], create_set: CreateSet
    ) -> None:
        """Test only the supplied fields change."""
        created = create_set(description="Keep me", tags=["old"])

        response = client.put(
            f"/api/v1/sets/{created['id']}",
            json={"title": "Renamed", "tags": ["new", "new", "tags"], "isPublic": True},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        flashcard_set = response.json()["flashcardSet"]
        assert flashcard_set["title"] == "Renamed"
        assert flashcard_set["description"] == "Keep me"
        assert flashcard_set["tags"] == ["new", "tags"]
        assert flashcard_set["isPublic"] is True

    def test_update_other_users_set(
        self,
        client: TestClient,
        other_auth_headers: dict[str, str],
        auth_headers: dict[str, str],
        create_set: CreateSet,
    ) -> None:
        """Test a non-owner cannot update a set."""
        created = create_set()

        response = client.put(
            f"/api/v1/sets/{created['id']}", json={"title": "Hijacked"}, headers=other_auth_headers
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        unchanged = client.get(f"/api/v1/sets/{created['id']}", headers=auth_headers)
        assert unchanged.json()["flashcardSet"]["title"] == "Spanish Basics"

    def test_update_invalid_description(
        self, client: TestClient, auth_headers: dict[str, str], create_set: CreateSet
    ) -> None:
        """Test a description over 500 characters is rejected."""
        created = create_set()

        response = client.put(
            f"/api/v1/sets/{created['id']}", json={"description": "d" * 501}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestDeleteFlashcardSet:
    """Test suite for DELETE /sets/:id endpoint."""

    def test_delete_set_and_cards(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_set: CreateSet,
        db_session: Session,
    ) -> None:
        """Test deleting a set removes its cards too."""
        created = create_set(cards=[{"question": "Q", "answer": "A"}])

        response = client.delete(f"/api/v1/sets/{created['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert client.get(f"/api/v1/sets/{created['id']}", headers=auth_headers).status_code == (
            status.HTTP_404_NOT_FOUND
        )
        assert db_session.scalars(select(models.FlashcardSetCard)).all() == []

    def test_delete_other_users_set(
        self, client: TestClient, other_auth_headers: dict[str, str], create_set: CreateSet
    ) -> None:
        """Test a non-owner cannot delete a set."""
        created = create_set()

        response = client.delete(f"/api/v1/sets/{created['id']}", headers=other_auth_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_missing_set(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Test deleting a missing set returns 404."""
        response = client.delete("/api/v1/sets/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestStoreFailures:
    """Test suite for store failures surfacing as kind/message error bodies."""

    def test_concurrent_modification_returns_conflict(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_set: CreateSet,
        db_session: Session,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test a write that lost a version race returns 409."""
        created = create_set()

        def stale_commit() -> None:
            raise StaleDataError("UPDATE statement on table 'flashcard_sets' matched 0 rows")

        monkeypatch.setattr(db_session, "commit", stale_commit)
        response = client.put(
            f"/api/v1/sets/{created['id']}", json={"title": "Renamed"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {
            "kind": "Conflict",
            "message": f"Flashcard set {created['id']} was modified by another request",
        }

    @pytest.mark.parametrize(
        ("driver_message", "status_code", "kind", "message"),
        [
            (
                "could not connect to server",
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "StoreUnavailable",
                "Store unavailable during find_by_id",
            ),
            (
                "canceling statement due to statement timeout",
                status.HTTP_504_GATEWAY_TIMEOUT,
                "Timeout",
                "Store timed out during find_by_id",
            ),
        ],
    )
    def test_store_error_on_read(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_set: CreateSet,
        db_session: Session,
        monkeypatch: pytest.MonkeyPatch,
        driver_message: str,
        status_code: int,
        kind: str,
        message: str,
    ) -> None:
        """Test driver failures while loading a set map to 503 and 504."""
        created = create_set()

        def failing_execute(*args: Any, **kwargs: Any) -> None:
            raise OperationalError("SELECT", {}, Exception(driver_message))

        monkeypatch.setattr(db_session, "execute", failing_execute)
        response = client.get(f"/api/v1/sets/{created['id']}", headers=auth_headers)

        assert response.status_code == status_code
        assert response.json() == {"kind": kind, "message": message}
