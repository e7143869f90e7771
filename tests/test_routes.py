"""API tests with authentication overridden and an in-memory database."""

from fastapi.testclient import TestClient

from services.firebase_service import EmailAlreadyInUse


class TestChecklistRoutes:

    def test_generate(self, client, free_limit):
        response = client.post("/api/checklists/generate", json={"name": "  Paris "})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Paris"
        assert body["type"] == "international"
        assert "Passaporte" in [item["name"] for item in body["items"]]

    def test_generate_rejects_blank_input(self, client):
        assert client.post("/api/checklists/generate", json={"name": "   "}).status_code == 422
        assert client.post("/api/checklists/generate", json={"name": ""}).status_code == 422
        assert client.post("/api/checklists/generate", json={}).status_code == 422

    def test_generate_at_plan_limit(self, client, free_limit, sample_checklist):
        for n in range(free_limit):
            checklist = sample_checklist.model_copy(update={"id": f"chk-{n}"})
            assert client.post("/api/checklists", json=checklist.model_dump(mode="json")).status_code == 200

        response = client.post("/api/checklists/generate", json={"name": "Gramado"})
        assert response.status_code == 403
        assert "basic" in response.json()["detail"]

    def test_save_rejects_duplicate_item_ids(self, client, sample_checklist):
        body = sample_checklist.model_dump(mode="json")
        for item in body["items"]:
            item["id"] = "same"

        assert client.post("/api/checklists", json=body).status_code == 422
        assert client.get("/api/checklists/chk-1").status_code == 404

    def test_save_beyond_plan_limit(self, client, free_limit):
        generated = [
            client.post("/api/checklists/generate", json={"name": "Paris"}).json()
            for _ in range(free_limit + 3)
        ]

        codes = [client.post("/api/checklists", json=checklist).status_code for checklist in generated]

        assert codes == [200] * free_limit + [403] * 3
        assert len(client.get("/api/checklists").json()) == free_limit

    def test_save_list_and_get(self, client, sample_checklist):
        client.post("/api/checklists", json=sample_checklist.model_dump(mode="json"))

        listing = client.get("/api/checklists").json()
        assert listing == [{
            "id": "chk-1",
            "name": "Paris",
            "type": "international",
            "type_label": "Internacional",
            "completed": 1,
            "total": 2,
            "progress": 50,
        }]

        response = client.get("/api/checklists/chk-1")
        assert response.status_code == 200
        assert response.json()["items"][0]["name"] == "Passaporte"

    def test_get_missing(self, client):
        assert client.get("/api/checklists/missing").status_code == 404

    def test_toggle(self, client, sample_checklist):
        client.post("/api/checklists", json=sample_checklist.model_dump(mode="json"))

        response = client.put("/api/checklists/chk-1/items/item-2/toggle")
        assert response.status_code == 200
        assert response.json()["done"] is True

        response = client.put("/api/checklists/chk-1/items/item-2/toggle", json={"done": False})
        assert response.json()["done"] is False

    def test_toggle_missing_item(self, client, sample_checklist):
        client.post("/api/checklists", json=sample_checklist.model_dump(mode="json"))
        assert client.put("/api/checklists/chk-1/items/nope/toggle").status_code == 404

    def test_delete(self, client, sample_checklist):
        client.post("/api/checklists", json=sample_checklist.model_dump(mode="json"))

        assert client.delete("/api/checklists/chk-1").status_code == 204
        assert client.delete("/api/checklists/chk-1").status_code == 404

    def test_export(self, client, sample_checklist):
        client.post("/api/checklists", json=sample_checklist.model_dump(mode="json"))

        response = client.get("/api/checklists/chk-1/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "checklist-paris.txt" in response.headers["content-disposition"]
        assert "Progresso: 50% concluído" in response.text
        assert "[✓] Passaporte" in response.text

    def test_requires_authentication(self, fake_db):
        from main import app

        response = TestClient(app).get("/api/checklists")
        assert response.status_code == 401


class TestDestinationRoutes:

    def test_suggestions(self, client):
        suggestions = client.get("/api/destinations/suggestions").json()
        assert "Florianópolis" in suggestions
        assert len(suggestions) == 22

    def test_suggestions_filtered(self, client):
        assert client.get("/api/destinations/suggestions", params={"q": "rio"}).json() == ["Rio de Janeiro"]

    def test_popular(self, client):
        assert client.get("/api/destinations/popular").json()[0] == "Florianópolis"

    def test_types(self, client):
        types = client.get("/api/destinations/types").json()
        assert len(types) == 7
        assert {"type": "default", "label": "Geral", "icon": "plane"} in types

    def test_classify(self, client):
        response = client.get("/api/destinations/classify", params={"q": "Serra da Mantiqueira"})
        assert response.json() == {
            "type": "mountain",
            "label": "Montanha",
            "icon": "mountain",
            "query": "Serra da Mantiqueira",
        }

    def test_classify_blank(self, client):
        assert client.get("/api/destinations/classify", params={"q": "  "}).status_code == 422


class TestAuthRoutes:

    def test_me(self, client, fake_db):
        fake_db.reference("users/user-1").set({"plan": "premium"})

        response = client.get("/api/auth/me")

        assert response.json() == {
            "uid": "user-1",
            "email": "ana@example.com",
            "full_name": "Ana",
            "plan": "premium",
        }

    def test_signup_existing_email(self, client, monkeypatch):
        def create_user(email, password, full_name):
            raise EmailAlreadyInUse("The email address is already in use by another account.")

        monkeypatch.setattr("api.routers.auth.create_user_in_firebase", create_user)

        response = client.post(
            "/api/auth/signup",
            json={"email": "ana@example.com", "password": "segredo123", "full_name": "Ana"},
        )
        assert response.status_code == 400
