"""
Portfolio Backend — /api/skills Endpoint Tests
================================================
"""

import pytest
import pytest_asyncio

from app.models.skill import Skill

URL = "/api/skills"


@pytest_asyncio.fixture
async def seeded_skills(db_session, profile_id):
    db_session.add_all(
        [
            Skill(profile_id=profile_id, name="Python", proficiency=95, type="language"),
            Skill(profile_id=profile_id, name="Go", proficiency=65, type="language"),
            Skill(profile_id=profile_id, name="FastAPI", proficiency=85, type="framework"),
            Skill(profile_id=profile_id, name="Django", proficiency=70, type="framework"),
            Skill(profile_id=profile_id, name="Docker", proficiency=40, type="devops"),
        ]
    )
    await db_session.commit()
    return profile_id


class TestSkillRead:
    @pytest.mark.asyncio
    async def test_read_ordered_by_proficiency(self, test_client, seeded_skills):
        response = await test_client.get(URL, params={"profile_id": seeded_skills})

        names = [s["name"] for s in response.json()["data"]]
        assert names == ["Python", "FastAPI", "Django", "Go", "Docker"]

    @pytest.mark.asyncio
    async def test_read_filters_by_profile(self, test_client, seeded_skills):
        response = await test_client.get(URL, params={"profile_id": seeded_skills + 1})

        assert response.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_read_missing(self, test_client):
        response = await test_client.get(URL, params={"id": 77})

        assert response.status_code == 404
        assert response.json()["message"] == "Skill not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params, field",
        [
            ({"action": "read", "id": 9223372036854775808}, "id"),
            ({"action": "read", "id": 2**31}, "id"),
            ({"action": "by_type", "profile_id": 2**31}, "profile_id"),
            ({"action": "high_proficiency", "profile_id": 1, "min": 2**40}, "min"),
        ],
    )
    async def test_oversized_query_integers(self, test_client, params, field):
        response = await test_client.get(URL, params=params)

        assert response.status_code == 400
        assert response.json()["message"] == f"Invalid value for: {field}"

    @pytest.mark.asyncio
    async def test_largest_integer_id_is_not_found(self, test_client):
        response = await test_client.get(URL, params={"id": 2**31 - 1})

        assert response.status_code == 404


class TestSkillAggregates:
    @pytest.mark.asyncio
    async def test_by_type(self, test_client, seeded_skills):
        response = await test_client.get(
            URL, params={"action": "by_type", "profile_id": seeded_skills}
        )

        assert response.status_code == 200
        groups = response.json()["data"]
        assert [g["type"] for g in groups] == ["language", "framework", "devops"]
        language = groups[0]
        assert language["skill_count"] == 2
        assert language["avg_proficiency"] == 80.0
        assert language["max_proficiency"] == 95
        assert language["min_proficiency"] == 65
        assert groups[1]["avg_proficiency"] == 77.5

    @pytest.mark.asyncio
    async def test_by_type_requires_profile(self, test_client):
        response = await test_client.get(URL, params={"action": "by_type"})

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID is required"

    @pytest.mark.asyncio
    async def test_high_proficiency_default_threshold(self, test_client, seeded_skills):
        response = await test_client.get(
            URL, params={"action": "high_proficiency", "profile_id": seeded_skills}
        )

        names = [s["name"] for s in response.json()["data"]]
        # 70 itself is included
        assert names == ["Python", "FastAPI", "Django"]

    @pytest.mark.asyncio
    async def test_high_proficiency_custom_threshold(self, test_client, seeded_skills):
        response = await test_client.get(
            URL,
            params={"action": "high_proficiency", "profile_id": seeded_skills, "min": 90},
        )

        assert [s["name"] for s in response.json()["data"]] == ["Python"]

    @pytest.mark.asyncio
    async def test_high_proficiency_requires_profile(self, test_client):
        response = await test_client.get(URL, params={"action": "high_proficiency"})

        assert response.status_code == 400


class TestSkillWrite:
    @pytest.mark.asyncio
    async def test_add(self, test_client, profile_id):
        response = await test_client.post(
            URL,
            params={"action": "add"},
            json={"profile_id": profile_id, "name": "Rust", "proficiency": 55, "type": "language"},
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Skill added successfully"

        fetched = await test_client.get(URL, params={"id": response.json()["id"]})
        assert fetched.json()["data"]["proficiency"] == 55

    @pytest.mark.asyncio
    async def test_add_defaults_proficiency_to_zero(self, test_client, profile_id):
        response = await test_client.post(
            URL, params={"action": "add"}, data={"profile_id": str(profile_id), "name": "Zig"}
        )

        fetched = await test_client.get(URL, params={"id": response.json()["id"]})
        assert fetched.json()["data"]["proficiency"] == 0

    @pytest.mark.asyncio
    async def test_add_requires_name_and_profile(self, test_client):
        response = await test_client.post(URL, params={"action": "add"}, json={"name": "Rust"})

        assert response.status_code == 400
        assert response.json()["message"] == "Name and profile_id are required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("proficiency", [-5, 101])
    async def test_add_rejects_out_of_range(self, test_client, profile_id, proficiency):
        response = await test_client.post(
            URL,
            params={"action": "add"},
            json={"profile_id": profile_id, "name": "Rust", "proficiency": proficiency},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Proficiency must be between 0 and 100"

    @pytest.mark.asyncio
    async def test_add_unknown_profile(self, test_client):
        response = await test_client.post(
            URL, params={"action": "add"}, json={"profile_id": 9999, "name": "Rust"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_add_non_numeric_proficiency(self, test_client, profile_id):
        response = await test_client.post(
            URL,
            params={"action": "add"},
            json={"profile_id": profile_id, "name": "Rust", "proficiency": "lots"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid value for: proficiency"

    @pytest.mark.asyncio
    async def test_add_oversized_profile_id(self, test_client):
        response = await test_client.post(
            URL, params={"action": "add"}, json={"profile_id": 2**63, "name": "Rust"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid value for: profile_id"

    @pytest.mark.asyncio
    async def test_update_partial(self, test_client, seeded_skills):
        skills = (await test_client.get(URL, params={"profile_id": seeded_skills})).json()["data"]
        docker = next(s for s in skills if s["name"] == "Docker")

        response = await test_client.post(
            URL, params={"action": "update", "id": docker["id"]}, json={"proficiency": 60}
        )

        assert response.json()["message"] == "Skill updated successfully"
        fetched = (await test_client.get(URL, params={"id": docker["id"]})).json()["data"]
        assert fetched["proficiency"] == 60
        assert fetched["type"] == "devops"

    @pytest.mark.asyncio
    async def test_update_range_checked(self, test_client, seeded_skills):
        response = await test_client.put(
            URL, params={"action": "update", "id": 1}, json={"proficiency": 150}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_rejects_delete_method(self, test_client):
        response = await test_client.delete(URL, params={"action": "update", "id": 1})

        assert response.status_code == 405

    @pytest.mark.asyncio
    async def test_delete(self, test_client, seeded_skills):
        response = await test_client.post(URL, params={"action": "delete", "id": 1})

        assert response.json()["message"] == "Skill deleted successfully"
        missing = await test_client.get(URL, params={"id": 1})
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_requires_id(self, test_client):
        response = await test_client.delete(URL, params={"action": "delete"})

        assert response.status_code == 400
        assert response.json()["message"] == "Skill ID is required"
