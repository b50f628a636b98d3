"""Tests for the materials checklist and tutorial step routes."""

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture
def base_url(created_project):
    return f"/api/projects/{created_project['id']}"


class TestMaterials:
    def test_add_material_returns_project_with_totals(self, api_client, base_url):
        api_client.post(f"{base_url}/materials", json={"name": "Boards", "quantity": 6, "unit": "pieces", "cost": 10.00})
        response = api_client.post(f"{base_url}/materials", json={"name": "Stain", "unit": "quart", "cost": 15.50})

        body = response.json()
        assert response.status_code == 201
        assert [m["name"] for m in body["materials"]] == ["Boards", "Stain"]
        assert body["materialSummary"]["totalCost"] == 25.5

    def test_tick_purchased(self, api_client, base_url):
        project = api_client.post(f"{base_url}/materials", json={"name": "Boards"}).json()
        material_id = project["materials"][0]["id"]

        body = api_client.patch(f"{base_url}/materials/{material_id}", json={"purchased": True}).json()

        assert body["materials"][0]["purchased"] is True
        assert body["materialSummary"]["purchased"] == 1

    def test_material_name_required(self, api_client, base_url):
        assert api_client.post(f"{base_url}/materials", json={"name": ""}).status_code == 422

    def test_delete_material_twice(self, api_client, base_url):
        project = api_client.post(f"{base_url}/materials", json={"name": "Boards"}).json()
        material_id = project["materials"][0]["id"]

        first = api_client.delete(f"{base_url}/materials/{material_id}")
        second = api_client.delete(f"{base_url}/materials/{material_id}")

        assert first.status_code == 200
        assert first.json()["materials"] == []
        assert second.status_code == 404

    def test_unknown_project(self, api_client):
        response = api_client.post("/api/projects/missing/materials", json={"name": "Boards"})

        assert response.status_code == 404


class TestSteps:
    def test_progress_follows_steps(self, api_client, base_url):
        project = api_client.post(f"{base_url}/steps", json={"title": "Sand", "estimatedTime": 180}).json()
        assert project["progress"] == 0
        project = api_client.post(f"{base_url}/steps", json={"title": "Paint", "estimatedTime": 120}).json()
        first_id, second_id = (s["id"] for s in project["tutorialSteps"])

        project = api_client.patch(f"{base_url}/steps/{first_id}", json={"completed": True}).json()
        assert project["progress"] == 50
        assert project["stepSummary"] == {"completed": 1, "count": 2, "estimatedMinutes": 300}

        project = api_client.patch(f"{base_url}/steps/{second_id}", json={"completed": True}).json()
        assert project["progress"] == 100

        project = api_client.delete(f"{base_url}/steps/{first_id}").json()
        assert project["progress"] == 100
        assert [s["id"] for s in project["tutorialSteps"]] == [second_id]

    def test_step_materials_are_free_text(self, api_client, base_url):
        project = api_client.post(
            f"{base_url}/steps",
            json={"title": "Stain", "materials": ["Wood Stain", "Brush"]},
        ).json()

        assert project["tutorialSteps"][0]["materials"] == ["Wood Stain", "Brush"]

    def test_unknown_step(self, api_client, base_url):
        response = api_client.patch(f"{base_url}/steps/missing", json={"completed": True})

        assert response.status_code == 404
        assert response.json()["detail"] == "Step not found"
