"""
Integration tests for the Homework API endpoints.

These tests verify:
1. POST /v1/homework - Assignment and validation
2. GET /v1/homework - Filters and ordering
3. PATCH /v1/homework/{id} - Completion toggling
4. DELETE /v1/homework/{id}
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient


def iso(dt: datetime) -> str:
    return dt.isoformat()


async def assign(client: AsyncClient, headers: dict, **body) -> dict:
    response = await client.post("/v1/homework", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestAssignHomework:
    """Tests for POST /v1/homework endpoint."""

    @pytest.mark.asyncio
    async def test_assign(self, client: AsyncClient, participant, staff_headers):
        due = datetime.now(timezone.utc) + timedelta(days=3)

        data = await assign(
            client,
            staff_headers,
            participant_id=participant.id,
            title="Get a state ID",
            due_date=iso(due),
        )

        assert data["title"] == "Get a state ID"
        assert data["participant_name"] == "Maria Santos"
        assert data["assigned_by_name"] == "Dana Staff"
        assert data["is_completed"] is False
        assert data["is_overdue"] is False
        assert data["completed_date"] is None

    @pytest.mark.asyncio
    async def test_missing_title_is_400(self, client: AsyncClient, participant, staff_headers):
        response = await client.post(
            "/v1/homework",
            json={"participant_id": participant.id, "title": " "},
            headers=staff_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Participant and title are required"

    @pytest.mark.asyncio
    async def test_unknown_participant_is_404(self, client: AsyncClient, staff_headers):
        response = await client.post(
            "/v1/homework",
            json={"participant_id": "missing", "title": "Open a bank account"},
            headers=staff_headers,
        )

        assert response.status_code == 404


class TestListHomework:
    """Tests for GET /v1/homework endpoint."""

    @pytest.mark.asyncio
    async def test_filters(self, client: AsyncClient, participant, staff_headers):
        now = datetime.now(timezone.utc)
        overdue = await assign(
            client,
            staff_headers,
            participant_id=participant.id,
            title="Overdue",
            due_date=iso(now - timedelta(days=2)),
        )
        upcoming = await assign(
            client,
            staff_headers,
            participant_id=participant.id,
            title="Upcoming",
            due_date=iso(now + timedelta(days=2)),
        )
        done = await assign(client, staff_headers, participant_id=participant.id, title="Done")
        await client.patch(
            f"/v1/homework/{done['homework_id']}",
            json={"is_completed": True},
            headers=staff_headers,
        )

        overdue_ids = [h["homework_id"] for h in (await client.get(
            "/v1/homework", params={"filter": "overdue"}
        )).json()]
        pending_ids = [h["homework_id"] for h in (await client.get(
            "/v1/homework", params={"filter": "pending"}
        )).json()]
        completed_ids = [h["homework_id"] for h in (await client.get(
            "/v1/homework", params={"filter": "completed"}
        )).json()]

        assert overdue_ids == [overdue["homework_id"]]
        assert pending_ids == [overdue["homework_id"], upcoming["homework_id"]]
        assert completed_ids == [done["homework_id"]]

    @pytest.mark.asyncio
    async def test_incomplete_listed_first(self, client: AsyncClient, participant, staff_headers):
        done = await assign(client, staff_headers, participant_id=participant.id, title="Done")
        await client.patch(
            f"/v1/homework/{done['homework_id']}",
            json={"is_completed": True},
            headers=staff_headers,
        )
        todo = await assign(client, staff_headers, participant_id=participant.id, title="Todo")

        response = await client.get("/v1/homework", params={"participant_id": participant.id})

        ids = [h["homework_id"] for h in response.json()]
        assert ids == [todo["homework_id"], done["homework_id"]]

    @pytest.mark.asyncio
    async def test_unknown_filter_is_422(self, client: AsyncClient):
        response = await client.get("/v1/homework", params={"filter": "someday"})

        assert response.status_code == 422


class TestUpdateHomework:
    """Tests for PATCH and DELETE on /v1/homework/{homework_id}."""

    @pytest.mark.asyncio
    async def test_toggle_completion(self, client: AsyncClient, participant, staff_headers):
        item = await assign(client, staff_headers, participant_id=participant.id, title="Resume")
        url = f"/v1/homework/{item['homework_id']}"

        completed = await client.patch(url, json={"is_completed": True}, headers=staff_headers)
        reopened = await client.patch(url, json={"is_completed": False}, headers=staff_headers)

        assert completed.json()["is_completed"] is True
        assert completed.json()["completed_date"] is not None
        assert reopened.json()["is_completed"] is False
        assert reopened.json()["completed_date"] is None

    @pytest.mark.asyncio
    async def test_edit_fields(self, client: AsyncClient, participant, staff_headers):
        item = await assign(
            client,
            staff_headers,
            participant_id=participant.id,
            title="Resume",
            notes="Bring references",
        )

        response = await client.patch(
            f"/v1/homework/{item['homework_id']}",
            json={"title": "Resume draft", "notes": None},
            headers=staff_headers,
        )

        data = response.json()
        assert data["title"] == "Resume draft"
        assert data["notes"] is None

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, participant, staff_headers):
        item = await assign(client, staff_headers, participant_id=participant.id, title="Resume")

        response = await client.delete(
            f"/v1/homework/{item['homework_id']}", headers=staff_headers
        )
        missing = await client.patch(
            f"/v1/homework/{item['homework_id']}",
            json={"is_completed": True},
            headers=staff_headers,
        )

        assert response.json() == {"success": True}
        assert missing.status_code == 404
        assert missing.json()["error"] == "HOMEWORK_NOT_FOUND"
