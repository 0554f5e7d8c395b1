# ARREMATO/backend/tests/test_ownership.py : un utilisateur ne touche pas aux biens d'un autre

import pytest
from arremato.auth import CurrentUser
from arremato.errors import PermissionDenied, ResourceNotFound
from arremato.models import models
from arremato.services.ownership import authorize, authorize_property_reference


class TestOwnershipPolicy:
    def test_direct_and_transitive_chains(self, db_session):
        alice = models.User(name="Alice", email="alice@example.com", password="x")
        bob = models.User(name="Bob", email="bob@example.com", password="x")
        db_session.add_all([alice, bob])
        db_session.commit()

        prop = models.Property(user_id=alice.id, name="Casa")
        db_session.add(prop)
        db_session.commit()
        task = models.Task(user_id=alice.id, property_id=prop.id, name="Pintura")
        db_session.add(task)
        db_session.commit()

        alice_id = CurrentUser(id=alice.id, email=alice.email)
        bob_id = CurrentUser(id=bob.id, email=bob.email)

        grant = authorize(db_session, alice_id, "task", task.id)
        assert grant.kind == "task"
        assert grant.user_id == alice.id
        assert grant.resource.id == task.id

        with pytest.raises(PermissionDenied):
            authorize(db_session, bob_id, "task", task.id)
        with pytest.raises(PermissionDenied):
            authorize(db_session, bob_id, "property", prop.id)
        with pytest.raises(ResourceNotFound):
            authorize(db_session, alice_id, "construction", 12345)
        with pytest.raises(PermissionDenied):
            authorize_property_reference(db_session, alice_id, 12345)

    def test_unknown_kind(self, db_session):
        with pytest.raises(ValueError):
            authorize(db_session, CurrentUser(id=1, email="a@example.com"), "spaceship", 1)


class TestCrossUserAccess:
    @pytest.fixture(autouse=True)
    def _setup(self, client, owner, intruder, make_property):
        self.client = client
        _, self.owner_headers = owner
        _, self.intruder_headers = intruder
        self.property_id = make_property(self.owner_headers)

    def test_task_operations_are_forbidden(self):
        task_id = self.client.post("/tasks", json={
            "property_id": self.property_id, "name": "Pintura"
        }, headers=self.owner_headers).json()["task"]["id"]

        assert self.client.post("/tasks", json={
            "property_id": self.property_id, "name": "Intrusa"
        }, headers=self.intruder_headers).status_code == 403
        assert self.client.put(f"/tasks/{task_id}", json={"name": "Hack"}, headers=self.intruder_headers).status_code == 403
        assert self.client.delete(f"/tasks/{task_id}", headers=self.intruder_headers).status_code == 403
        assert self.client.get(f"/tasks/property/{self.property_id}", headers=self.intruder_headers).status_code == 403

        tasks = self.client.get(f"/tasks/property/{self.property_id}", headers=self.owner_headers).json()
        assert [t["name"] for t in tasks] == ["Pintura"]

    def test_transaction_operations_are_forbidden(self):
        finance = self.client.post("/finances", json={
            "property_id": self.property_id, "type": "expense", "date": "2024-01-10", "amount": 300
        }, headers=self.owner_headers).json()["transaction"]

        assert self.client.post("/finances", json={
            "property_id": self.property_id, "type": "expense", "date": "2024-01-10", "amount": 1
        }, headers=self.intruder_headers).status_code == 403
        assert self.client.post("/finances/installments", json={
            "property_id": self.property_id, "date": "2024-01-10", "amount": 1200, "total_installments": 12
        }, headers=self.intruder_headers).status_code == 403
        assert self.client.post("/transactions", json={
            "property_id": self.property_id, "type": "income", "date": "2024-01-10", "amount": 1
        }, headers=self.intruder_headers).status_code == 403
        assert self.client.put(f"/finances/{finance['id']}", json={"amount": 1}, headers=self.intruder_headers).status_code == 403
        assert self.client.delete(f"/finances/{finance['id']}", headers=self.intruder_headers).status_code == 403
        assert self.client.get(f"/finances/property/{self.property_id}", headers=self.intruder_headers).status_code == 403

        finances = self.client.get("/finances", headers=self.owner_headers).json()
        assert len(finances) == 1
        assert finances[0]["amount"] == 300
        assert self.client.get("/finances", headers=self.intruder_headers).json() == []

    def test_construction_operations_are_forbidden(self):
        construction = self.client.post("/constructions", json={
            "property_id": self.property_id, "budget": 10000
        }, headers=self.owner_headers).json()["construction"]

        assert self.client.post("/constructions", json={
            "property_id": self.property_id, "budget": 1
        }, headers=self.intruder_headers).status_code == 403
        assert self.client.put(
            f"/constructions/{construction['id']}", json={"spent": 9999}, headers=self.intruder_headers
        ).status_code == 403
        assert self.client.delete(f"/constructions/{construction['id']}", headers=self.intruder_headers).status_code == 403

        constructions = self.client.get(f"/constructions/property/{self.property_id}", headers=self.owner_headers).json()
        assert len(constructions) == 1
        assert constructions[0]["spent"] is None

    def test_owner_cannot_move_transaction_to_foreign_property(self, make_property):
        foreign_property = make_property(self.intruder_headers, name="Alheio")
        finance = self.client.post("/finances", json={
            "property_id": self.property_id, "type": "expense", "date": "2024-01-10", "amount": 300
        }, headers=self.owner_headers).json()["transaction"]

        response = self.client.put(
            f"/finances/{finance['id']}", json={"property_id": foreign_property}, headers=self.owner_headers
        )
        assert response.status_code == 403
