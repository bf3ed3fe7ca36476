"""
Integration tests for the Outcome API endpoints.

These tests verify:
1. POST /v1/outcomes - Recording and OTHER-housing validation
2. GET /v1/outcomes - Listing
"""

import pytest
from httpx import AsyncClient


class TestRecordOutcome:
    """Tests for POST /v1/outcomes endpoint."""

    @pytest.mark.asyncio
    async def test_record_outcome(self, client: AsyncClient, participant, staff_headers):
        response = await client.post(
            "/v1/outcomes",
            json={
                "participant_id": participant.id,
                "housing_status": "SHELTER",
                "employment_status": "PART_TIME",
                "benefits": ["SNAP", "MEDI_CAL", "SNAP"],
                "documents_obtained": ["ID"],
                "other_housing_details": "ignored",
            },
            headers=staff_headers,
        )

        assert response.status_code == 201

        data = response.json()
        assert data["housing_status"] == "SHELTER"
        assert data["employment_status"] == "PART_TIME"
        assert data["benefits"] == ["SNAP", "MEDI_CAL"]
        assert data["documents_obtained"] == ["ID"]
        assert data["other_housing_details"] is None
        assert data["participant_name"] == "Maria Santos"

    @pytest.mark.asyncio
    async def test_defaults(self, client: AsyncClient, participant, staff_headers):
        response = await client.post(
            "/v1/outcomes",
            json={"participant_id": participant.id},
            headers=staff_headers,
        )

        data = response.json()
        assert data["housing_status"] == "STREET"
        assert data["employment_status"] == "NONE"
        assert data["benefits"] == []

    @pytest.mark.asyncio
    async def test_other_requires_details(self, client: AsyncClient, participant, staff_headers):
        response = await client.post(
            "/v1/outcomes",
            json={"participant_id": participant.id, "housing_status": "OTHER"},
            headers=staff_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Please specify details for 'Other' housing status"

    @pytest.mark.asyncio
    async def test_other_keeps_details(self, client: AsyncClient, participant, staff_headers):
        response = await client.post(
            "/v1/outcomes",
            json={
                "participant_id": participant.id,
                "housing_status": "OTHER",
                "other_housing_details": " Staying with family ",
            },
            headers=staff_headers,
        )

        assert response.status_code == 201
        assert response.json()["other_housing_details"] == "Staying with family"

    @pytest.mark.asyncio
    async def test_unknown_status_is_422(self, client: AsyncClient, participant, staff_headers):
        response = await client.post(
            "/v1/outcomes",
            json={"participant_id": participant.id, "housing_status": "CASTLE"},
            headers=staff_headers,
        )

        assert response.status_code == 422


class TestListOutcomes:
    """Tests for GET /v1/outcomes endpoint."""

    @pytest.mark.asyncio
    async def test_list_by_participant(self, client: AsyncClient, participant, staff_headers):
        for status in ("STREET", "TRANSITIONAL"):
            await client.post(
                "/v1/outcomes",
                json={"participant_id": participant.id, "housing_status": status},
                headers=staff_headers,
            )

        response = await client.get("/v1/outcomes", params={"participant_id": participant.id})

        assert response.status_code == 200
        assert [o["housing_status"] for o in response.json()] == ["TRANSITIONAL", "STREET"]
