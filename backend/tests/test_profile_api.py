"""
Portfolio Backend — /api/profile Endpoint Tests
=================================================

Runs the full stack (router → service → SQLite) through ASGITransport.
"""

import pytest

from app.models.education import Education
from app.models.hobby import Hobby
from app.models.project import Project
from app.models.skill import Skill

URL = "/api/profile"


class TestProfileRead:
    @pytest.mark.asyncio
    async def test_read_single(self, test_client, profile_id):
        response = await test_client.get(URL, params={"id": profile_id})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["name"] == "Jane Doe"
        assert body["data"]["years_experience"] == 5
        assert "message" not in body

    @pytest.mark.asyncio
    async def test_default_action_is_read(self, test_client, profile_id):
        response = await test_client.get(URL)

        body = response.json()
        assert body["success"] is True
        assert [p["id"] for p in body["data"]] == [profile_id]

    @pytest.mark.asyncio
    async def test_read_all_newest_first(self, test_client, profile_id):
        await test_client.post(URL, params={"action": "add"}, json={"name": "Second"})

        response = await test_client.get(URL, params={"action": "read"})

        names = [p["name"] for p in response.json()["data"]]
        assert names == ["Second", "Jane Doe"]

    @pytest.mark.asyncio
    async def test_read_missing(self, test_client):
        response = await test_client.get(URL, params={"id": 404})

        assert response.status_code == 404
        body = response.json()
        assert body == {
            "success": False,
            "message": "Profile not found",
            "error": "not_found",
            "request_id": response.headers["X-Request-ID"],
        }

    @pytest.mark.asyncio
    async def test_non_integer_id(self, test_client):
        response = await test_client.get(URL, params={"id": "abc"})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "id" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_id_beyond_integer_column(self, test_client):
        response = await test_client.get(URL, params={"id": 2**63})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid value for: id"

    @pytest.mark.asyncio
    async def test_negative_id(self, test_client):
        response = await test_client.get(URL, params={"action": "complete", "id": -1})

        assert response.status_code == 400


class TestProfileWrite:
    @pytest.mark.asyncio
    async def test_add_json(self, test_client):
        response = await test_client.post(
            URL,
            params={"action": "add"},
            json={"name": "John Smith", "role": "Designer", "years_experience": 3},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Profile added successfully"
        assert isinstance(body["id"], int)

        fetched = await test_client.get(URL, params={"id": body["id"]})
        assert fetched.json()["data"]["role"] == "Designer"
        assert fetched.json()["data"]["projects_completed"] == 0

    @pytest.mark.asyncio
    async def test_add_form_fields(self, test_client):
        response = await test_client.post(
            URL, params={"action": "add"}, data={"name": "Form User", "location": "Lisbon"}
        )

        assert response.status_code == 201
        fetched = await test_client.get(URL, params={"id": response.json()["id"]})
        assert fetched.json()["data"]["location"] == "Lisbon"

    @pytest.mark.asyncio
    async def test_add_requires_name(self, test_client):
        response = await test_client.post(URL, params={"action": "add"}, json={"role": "X"})

        assert response.status_code == 400
        assert response.json()["message"] == "Name is required"

    @pytest.mark.asyncio
    async def test_add_rejects_get(self, test_client):
        response = await test_client.get(URL, params={"action": "add"})

        assert response.status_code == 405
        assert response.json()["message"] == "Invalid request method"
        assert response.headers["Allow"] == "POST"

    @pytest.mark.asyncio
    async def test_update_with_put(self, test_client, profile_id):
        response = await test_client.put(
            URL, params={"action": "update", "id": profile_id}, json={"bio": "New bio"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Profile updated successfully"

        fetched = await test_client.get(URL, params={"id": profile_id})
        data = fetched.json()["data"]
        assert data["bio"] == "New bio"
        assert data["name"] == "Jane Doe"

    @pytest.mark.asyncio
    async def test_update_requires_id(self, test_client):
        response = await test_client.post(URL, params={"action": "update"}, json={"bio": "x"})

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID is required"

    @pytest.mark.asyncio
    async def test_update_missing_row(self, test_client):
        response = await test_client.put(
            URL, params={"action": "update", "id": 999}, json={"bio": "x"}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found"

    @pytest.mark.asyncio
    async def test_delete_missing_row(self, test_client):
        response = await test_client.delete(URL, params={"action": "delete", "id": 999})

        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found"

    @pytest.mark.asyncio
    async def test_delete_cascades_to_children(self, test_client, db_session, profile_id):
        db_session.add_all(
            [
                Skill(profile_id=profile_id, name="Python", proficiency=90),
                Project(profile_id=profile_id, title="Site"),
            ]
        )
        await db_session.commit()

        response = await test_client.delete(URL, params={"action": "delete", "id": profile_id})

        assert response.status_code == 200
        assert response.json()["message"] == "Profile deleted successfully"
        skills = await test_client.get("/api/skills", params={"profile_id": profile_id})
        assert skills.json()["data"] == []

    @pytest.mark.asyncio
    async def test_unknown_action(self, test_client):
        response = await test_client.get(URL, params={"action": "explode"})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Invalid action. Use: read, add, update, delete, complete"
        )


class TestProfileComplete:
    @pytest.mark.asyncio
    async def test_complete_counts_and_average(self, test_client, db_session, profile_id):
        db_session.add_all(
            [
                Skill(profile_id=profile_id, name="Python", proficiency=90),
                Skill(profile_id=profile_id, name="SQL", proficiency=75),
                Skill(profile_id=profile_id, name="CSS", proficiency=60),
                Project(profile_id=profile_id, title="Portfolio"),
                Project(profile_id=profile_id, title="Blog"),
                Education(profile_id=profile_id, institution="State University"),
                Hobby(profile_id=profile_id, name="Chess"),
                Hobby(profile_id=profile_id, name="VS Code", category="tool"),
            ]
        )
        await db_session.commit()

        response = await test_client.get(URL, params={"action": "complete", "id": profile_id})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Jane Doe"
        # Joins multiply rows; counts must still be per-table
        assert data["total_skills"] == 3
        assert data["total_projects"] == 2
        assert data["total_education"] == 1
        assert data["total_hobbies"] == 2
        assert data["avg_skill_proficiency"] == 75.0

    @pytest.mark.asyncio
    async def test_complete_without_children(self, test_client, profile_id):
        response = await test_client.get(URL, params={"action": "complete", "id": profile_id})

        data = response.json()["data"]
        assert data["total_skills"] == 0
        assert data["total_projects"] == 0
        assert data["avg_skill_proficiency"] is None

    @pytest.mark.asyncio
    async def test_complete_requires_id(self, test_client):
        response = await test_client.get(URL, params={"action": "complete"})

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID is required"

    @pytest.mark.asyncio
    async def test_complete_missing_profile(self, test_client):
        response = await test_client.get(URL, params={"action": "complete", "id": 321})

        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found"
