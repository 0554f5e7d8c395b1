# ARREMATO/backend/tests/test_references.py : catégories, types de dépense, emprunts et processus

from arremato.models import models


class TestCategories:
    def test_create_and_list_categories(self, client, owner):
        _, headers = owner
        response = client.post("/categories", json={"name": "Reforma", "description": "Obras"}, headers=headers)
        assert response.status_code == 201
        assert response.json()["category"]["name"] == "Reforma"

        listing = client.get("/categories", headers=headers).json()
        assert [c["name"] for c in listing] == ["Reforma"]

    def test_categories_require_auth(self, client):
        assert client.get("/categories").status_code == 401

    def test_expense_types(self, client, owner, db_session):
        _, headers = owner
        db_session.add_all([models.ExpenseType(name="IPTU"), models.ExpenseType(name="Condomínio")])
        db_session.commit()

        response = client.get("/expense-types", headers=headers)
        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == ["IPTU", "Condomínio"]


class TestLoans:
    def test_create_and_list_loans(self, client, owner, intruder):
        user_id, headers = owner
        response = client.post("/loans", json={
            "amount": 100000, "outstanding_balance": 80000, "due_date": "2030-06-01"
        }, headers=headers)
        assert response.status_code == 201
        loan = response.json()["loan"]
        assert loan["user_id"] == user_id
        assert loan["due_date"] == "2030-06-01"

        assert len(client.get("/loans", headers=headers).json()) == 1
        _, intruder_headers = intruder
        assert client.get("/loans", headers=intruder_headers).json() == []

    def test_loan_requires_positive_amount(self, client, owner):
        _, headers = owner
        assert client.post("/loans", json={"amount": 0}, headers=headers).status_code == 400


class TestProcesses:
    def test_create_process(self, client, owner, make_property):
        _, headers = owner
        property_id = make_property(headers)
        response = client.post("/processes", json={
            "property_id": property_id,
            "activity": "Imissão na posse",
            "status": "blocked",
            "progress": 40,
            "updated_by": "advogado"
        }, headers=headers)
        assert response.status_code == 201
        assert response.json()["process"]["status"] == "blocked"

        listing = client.get(f"/processes/property/{property_id}", headers=headers).json()
        assert [p["activity"] for p in listing] == ["Imissão na posse"]

    def test_process_progress_bounds(self, client, owner, make_property):
        _, headers = owner
        property_id = make_property(headers)
        response = client.post("/processes", json={
            "property_id": property_id, "activity": "Registro", "progress": 150
        }, headers=headers)
        assert response.status_code == 400

    def test_process_on_foreign_property(self, client, owner, intruder, make_property):
        _, headers = owner
        _, intruder_headers = intruder
        property_id = make_property(headers)
        response = client.post("/processes", json={
            "property_id": property_id, "activity": "Registro"
        }, headers=intruder_headers)
        assert response.status_code == 403
