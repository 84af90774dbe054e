"""
Portfolio Backend — /api/projects Endpoint Tests
==================================================
"""

import pytest
import pytest_asyncio

from app.models.project import Project

URL = "/api/projects"


@pytest_asyncio.fixture
async def seeded_projects(db_session, profile_id):
    db_session.add_all(
        [
            Project(profile_id=profile_id, title="Blog", tags="python,django", display_order=2),
            Project(profile_id=profile_id, title="Portfolio", tags="html,css,js", display_order=1),
            Project(profile_id=profile_id, title="API", tags="python,fastapi", display_order=3),
            Project(profile_id=profile_id, title="Odd", tags="100%_done", display_order=4),
        ]
    )
    await db_session.commit()
    return profile_id


class TestProjectRead:
    @pytest.mark.asyncio
    async def test_read_by_display_order(self, test_client, seeded_projects):
        response = await test_client.get(URL, params={"profile_id": seeded_projects})

        titles = [p["title"] for p in response.json()["data"]]
        assert titles == ["Portfolio", "Blog", "API", "Odd"]

    @pytest.mark.asyncio
    async def test_equal_display_order_newest_first(self, test_client, profile_id):
        for title in ("First", "Second"):
            await test_client.post(
                URL, params={"action": "add"}, json={"profile_id": profile_id, "title": title}
            )

        response = await test_client.get(URL, params={"profile_id": profile_id})

        assert [p["title"] for p in response.json()["data"]] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_read_missing(self, test_client):
        response = await test_client.get(URL, params={"id": 5})

        assert response.status_code == 404
        assert response.json()["message"] == "Project not found"


class TestProjectSearch:
    @pytest.mark.asyncio
    async def test_search_by_tag(self, test_client, seeded_projects):
        response = await test_client.get(
            URL, params={"action": "search", "profile_id": seeded_projects, "tag": "python"}
        )

        assert [p["title"] for p in response.json()["data"]] == ["Blog", "API"]

    @pytest.mark.asyncio
    async def test_search_is_substring_match(self, test_client, seeded_projects):
        response = await test_client.get(
            URL, params={"action": "search", "profile_id": seeded_projects, "tag": "fast"}
        )

        assert [p["title"] for p in response.json()["data"]] == ["API"]

    @pytest.mark.asyncio
    async def test_search_wildcards_match_literally(self, test_client, seeded_projects):
        response = await test_client.get(
            URL, params={"action": "search", "profile_id": seeded_projects, "tag": "%_"}
        )

        assert [p["title"] for p in response.json()["data"]] == ["Odd"]

    @pytest.mark.asyncio
    async def test_search_requires_profile_and_tag(self, test_client, profile_id):
        response = await test_client.get(
            URL, params={"action": "search", "profile_id": profile_id}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Profile ID and tag are required for search"


class TestProjectWrite:
    @pytest.mark.asyncio
    async def test_add_and_read_back(self, test_client, profile_id):
        response = await test_client.post(
            URL,
            params={"action": "add"},
            json={
                "profile_id": profile_id,
                "title": "CLI Tool",
                "description": "A command line tool",
                "link": "https://example.com/cli",
                "tags": "python,cli",
            },
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Project added successfully"
        data = (await test_client.get(URL, params={"id": response.json()["id"]})).json()["data"]
        assert data["tags"] == "python,cli"
        assert data["display_order"] == 0

    @pytest.mark.asyncio
    async def test_add_requires_title(self, test_client, profile_id):
        response = await test_client.post(
            URL, params={"action": "add"}, json={"profile_id": profile_id}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title and profile_id are required"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, test_client, seeded_projects):
        updated = await test_client.put(
            URL, params={"action": "update", "id": 1}, json={"display_order": 10}
        )
        assert updated.json()["message"] == "Project updated successfully"

        deleted = await test_client.delete(URL, params={"action": "delete", "id": 1})
        assert deleted.json()["message"] == "Project deleted successfully"

    @pytest.mark.asyncio
    async def test_update_requires_id(self, test_client):
        response = await test_client.put(URL, params={"action": "update"}, json={"title": "x"})

        assert response.json()["message"] == "Project ID is required"
