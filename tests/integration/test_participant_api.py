"""
Integration tests for the Participant API endpoints.

These tests verify:
1. POST /v1/participants - Enrollment and validation
2. GET /v1/participants - Listing order and counts
3. GET /v1/participants/{id} - Detail with payment status
"""

import pytest
from httpx import AsyncClient


class TestCreateParticipant:
    """Tests for POST /v1/participants endpoint."""

    @pytest.mark.asyncio
    async def test_enroll_participant(self, client: AsyncClient, staff_headers):
        response = await client.post(
            "/v1/participants",
            json={
                "first_name": "  Jordan ",
                "last_name": "Lee",
                "preferred_name": "JJ",
                "phone": "(619) 555-0102",
            },
            headers=staff_headers,
        )

        assert response.status_code == 201

        data = response.json()
        assert data["participant_id"]
        assert data["first_name"] == "Jordan"
        assert data["display_name"] == "JJ Lee"
        assert data["is_active"] is True
        assert data["shift_count"] == 0
        assert data["payment_count"] == 0

    @pytest.mark.asyncio
    async def test_blank_name_is_400(self, client: AsyncClient, staff_headers):
        response = await client.post(
            "/v1/participants",
            json={"first_name": "Jordan", "last_name": "  "},
            headers=staff_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "First name and last name are required"

    @pytest.mark.asyncio
    async def test_requires_identity(self, client: AsyncClient):
        response = await client.post(
            "/v1/participants",
            json={"first_name": "Jordan", "last_name": "Lee"},
        )

        assert response.status_code == 401


class TestListParticipants:
    """Tests for GET /v1/participants endpoint."""

    @pytest.mark.asyncio
    async def test_ordered_by_last_name_with_counts(
        self,
        client: AsyncClient,
        participant,
        staff_headers,
        seed_payments,
    ):
        await client.post(
            "/v1/participants",
            json={"first_name": "Ana", "last_name": "Alvarez"},
            headers=staff_headers,
        )
        await seed_payments(participant.id, 2)
        await client.post(
            "/v1/shifts",
            json={"participant_id": participant.id},
            headers=staff_headers,
        )

        response = await client.get("/v1/participants")

        assert response.status_code == 200

        data = response.json()
        assert [p["last_name"] for p in data] == ["Alvarez", "Santos"]
        santos = data[1]
        assert santos["payment_count"] == 2
        assert santos["shift_count"] == 1


class TestGetParticipant:
    """Tests for GET /v1/participants/{participant_id} endpoint."""

    @pytest.mark.asyncio
    async def test_detail_includes_payment_status(
        self,
        client: AsyncClient,
        participant,
        seed_payments,
    ):
        await seed_payments(participant.id, 5)

        response = await client.get(f"/v1/participants/{participant.id}")

        assert response.status_code == 200

        data = response.json()
        assert data["participant"]["display_name"] == "Mari Santos"
        assert data["payment_status"]["lifetime_total"] == 400
        assert data["payment_status"]["payments_remaining"] == 20
        assert data["payment_status"]["progress_percentage"] == 20
        assert data["payment_status"]["allowed"] is True

    @pytest.mark.asyncio
    async def test_unknown_participant_is_404(self, client: AsyncClient):
        response = await client.get("/v1/participants/missing")

        assert response.status_code == 404

        data = response.json()
        assert data["error"] == "PARTICIPANT_NOT_FOUND"
        assert "request_id" in data
