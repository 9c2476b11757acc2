"""Tests for card and review API endpoints."""

from collections.abc import Callable
from typing import Any
from uuid import uuid4

import pytest
from fastapi import status
from fastapi.testclient import TestClient

CreateSet = Callable[..., dict[str, Any]]


@pytest.fixture
def study_set(create_set: CreateSet) -> dict[str, Any]:
    """A set owned by the test user with three cards."""
    return create_set(
        cards=[
            {"question": "Hola", "answer": "Hello"},
            {"question": "Gracias", "answer": "Thank you"},
            {"question": "Adiós", "answer": "Goodbye"},
        ]
    )


def _review(
    client: TestClient,
    headers: dict[str, str],
    set_id: int,
    card_id: str,
    is_correct: bool,
) -> Any:
    return client.post(
        f"/api/v1/sets/{set_id}/cards/{card_id}/review",
        json={"isCorrect": is_correct},
        headers=headers,
    )


class TestAddCard:
    """Test suite for POST /sets/:id/cards endpoint."""

    def test_add_card(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test a card is appended to the end of the set."""
        response = client.post(
            f"/api/v1/sets/{study_set['id']}/cards",
            json={"question": "  Por favor ", "answer": "Please"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        card = response.json()["card"]
        assert card["question"] == "Por favor"
        assert card["isCorrect"] is None
        assert card["reviewCount"] == 0

        detail = client.get(f"/api/v1/sets/{study_set['id']}", headers=auth_headers).json()
        assert detail["flashcardSet"]["cardCount"] == 4
        assert detail["flashcardSet"]["cards"][-1]["id"] == card["id"]

    def test_add_card_missing_answer(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test a card without an answer is rejected."""
        response = client.post(
            f"/api/v1/sets/{study_set['id']}/cards",
            json={"question": "Q", "answer": ""},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_add_card_to_other_users_set(
        self,
        client: TestClient,
        other_auth_headers: dict[str, str],
        study_set: dict[str, Any],
    ) -> None:
        """Test a non-owner cannot add cards."""
        response = client.post(
            f"/api/v1/sets/{study_set['id']}/cards",
            json={"question": "Q", "answer": "A"},
            headers=other_auth_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_add_card_to_missing_set(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test adding to a missing set returns 404."""
        response = client.post(
            "/api/v1/sets/99999/cards",
            json={"question": "Q", "answer": "A"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateCard:
    """Test suite for PUT /sets/:id/cards/:card_id endpoint."""

    def test_update_card_keeps_review_state(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test editing a reviewed card keeps its review state and position."""
        card_id = study_set["cards"][1]["id"]
        _review(client, auth_headers, study_set["id"], card_id, True)

        response = client.put(
            f"/api/v1/sets/{study_set['id']}/cards/{card_id}",
            json={"question": "Muchas gracias"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        card = response.json()["card"]
        assert card["question"] == "Muchas gracias"
        assert card["answer"] == "Thank you"
        assert card["isCorrect"] is True
        assert card["reviewCount"] == 1
        assert card["lastReviewed"] is not None

        detail = client.get(f"/api/v1/sets/{study_set['id']}", headers=auth_headers).json()
        assert detail["flashcardSet"]["cards"][1]["id"] == card_id

    def test_update_card_without_fields(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test an update with nothing to change is rejected."""
        card_id = study_set["cards"][0]["id"]

        response = client.put(
            f"/api/v1/sets/{study_set['id']}/cards/{card_id}", json={}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["kind"] == "InvalidInput"

    def test_update_unknown_card(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test updating a card that is not in the set returns 404."""
        response = client.put(
            f"/api/v1/sets/{study_set['id']}/cards/{uuid4()}",
            json={"question": "Q"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["kind"] == "NotFound"

    def test_update_card_malformed_id(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test a card id that is not a UUID is rejected."""
        response = client.put(
            f"/api/v1/sets/{study_set['id']}/cards/not-a-uuid",
            json={"question": "Q"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestRemoveCard:
    """Test suite for DELETE /sets/:id/cards/:card_id endpoint."""

    def test_remove_card_keeps_order(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test removing a card keeps the order of the others."""
        first, middle, last = (c["id"] for c in study_set["cards"])

        response = client.delete(
            f"/api/v1/sets/{study_set['id']}/cards/{middle}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        detail = client.get(f"/api/v1/sets/{study_set['id']}", headers=auth_headers).json()
        assert [c["id"] for c in detail["flashcardSet"]["cards"]] == [first, last]

    def test_remove_card_keeps_score_until_next_review(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test the score is not recomputed when a card is removed."""
        first, second, _ = (c["id"] for c in study_set["cards"])
        _review(client, auth_headers, study_set["id"], first, True)
        _review(client, auth_headers, study_set["id"], second, False)

        client.delete(f"/api/v1/sets/{study_set['id']}/cards/{second}", headers=auth_headers)

        detail = client.get(f"/api/v1/sets/{study_set['id']}", headers=auth_headers).json()
        assert detail["flashcardSet"]["averageScore"] == 50
        assert detail["flashcardSet"]["totalReviews"] == 2

    def test_remove_unknown_card(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test removing a card that is not in the set returns 404."""
        response = client.delete(
            f"/api/v1/sets/{study_set['id']}/cards/{uuid4()}", headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestReviewCard:
    """Test suite for POST /sets/:id/cards/:card_id/review endpoint."""

    def test_first_correct_review(
        self, client: TestClient, auth_headers: dict[str, str], create_set: CreateSet
    ) -> None:
        """Test one correct review of a one-card set scores 100."""
        flashcard_set = create_set(cards=[{"question": "Q", "answer": "A"}])
        card_id = flashcard_set["cards"][0]["id"]

        response = _review(client, auth_headers, flashcard_set["id"], card_id, True)

        assert response.status_code == status.HTTP_200_OK
        review = response.json()["review"]
        assert review["cardId"] == card_id
        assert review["isCorrect"] is True
        assert review["reviewCount"] == 1
        assert review["totalReviews"] == 1
        assert review["averageScore"] == 100
        assert review["timestamp"]

    def test_mixed_reviews(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test one correct and one incorrect review score 50."""
        first, second, _ = (c["id"] for c in study_set["cards"])

        _review(client, auth_headers, study_set["id"], first, True)
        response = _review(client, auth_headers, study_set["id"], second, False)

        review = response.json()["review"]
        assert review["averageScore"] == 50
        assert review["totalReviews"] == 2

        detail = client.get(f"/api/v1/sets/{study_set['id']}", headers=auth_headers).json()
        cards = detail["flashcardSet"]["cards"]
        assert [c["isCorrect"] for c in cards] == [True, False, None]
        assert detail["flashcardSet"]["averageScore"] == 50

    def test_second_review_overwrites_outcome(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test reviewing a card twice keeps only the latest outcome."""
        card_id = study_set["cards"][0]["id"]

        _review(client, auth_headers, study_set["id"], card_id, False)
        response = _review(client, auth_headers, study_set["id"], card_id, True)

        review = response.json()["review"]
        assert review["reviewCount"] == 2
        assert review["totalReviews"] == 2
        assert review["averageScore"] == 100

    def test_review_requires_boolean(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test a non-boolean outcome is rejected."""
        card_id = study_set["cards"][0]["id"]

        response = client.post(
            f"/api/v1/sets/{study_set['id']}/cards/{card_id}/review",
            json={"isCorrect": "yes"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["kind"] == "InvalidInput"

    def test_review_by_other_user(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
        create_set: CreateSet,
    ) -> None:
        """Test a non-owner cannot review cards, even in a public set."""
        flashcard_set = create_set(isPublic=True, cards=[{"question": "Q", "answer": "A"}])
        card_id = flashcard_set["cards"][0]["id"]

        response = _review(client, other_auth_headers, flashcard_set["id"], card_id, True)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        detail = client.get(f"/api/v1/sets/{flashcard_set['id']}", headers=auth_headers).json()
        assert detail["flashcardSet"]["totalReviews"] == 0

    def test_review_unknown_card(
        self, client: TestClient, auth_headers: dict[str, str], study_set: dict[str, Any]
    ) -> None:
        """Test reviewing a card that is not in the set returns 404."""
        response = _review(client, auth_headers, study_set["id"], str(uuid4()), True)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_review_set_id_out_of_range(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Test a set id too large for the id column is rejected."""
        response = _review(client, auth_headers, 2**64, str(uuid4()), True)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert response.json()["kind"] == "InvalidInput"
