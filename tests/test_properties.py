# ARREMATO/backend/tests/test_properties.py


class TestProperties:
    def test_create_property(self, client, owner):
        user_id, headers = owner
        response = client.post("/properties", json={
            "name": "Apartamento Centro",
            "address": "Rua das Flores",
            "number": "100",
            "bid_value": 250000,
            "market_value": 400000,
            "acquisition_date": "2024-03-10",
            "purpose": "sale",
            "purchased_alone": True
        }, headers=headers)
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Imóvel cadastrado com sucesso."
        assert data["property"]["user_id"] == user_id
        assert data["property"]["purpose"] == "sale"
        assert data["property"]["acquisition_date"] == "2024-03-10"

    def test_create_property_invalid_purpose(self, client, owner):
        _, headers = owner
        response = client.post("/properties", json={"name": "Casa", "purpose": "flip"}, headers=headers)
        assert response.status_code == 400
        assert "purpose" in response.json()["error"]

    def test_created_property_listed_exactly_once(self, client, owner, make_property):
        _, headers = owner
        property_id = make_property(headers)

        for path in ("/properties", "/user-properties"):
            response = client.get(path, headers=headers)
            assert response.status_code == 200
            ids = [p["id"] for p in response.json()]
            assert ids.count(property_id) == 1

    def test_listing_only_shows_own_properties(self, client, owner, intruder, make_property):
        _, owner_headers = owner
        _, intruder_headers = intruder
        make_property(owner_headers, name="Do Dono")
        make_property(intruder_headers, name="Do Outro")

        names = [p["name"] for p in client.get("/properties", headers=owner_headers).json()]
        assert names == ["Do Dono"]

    def test_get_and_update_property(self, client, owner, make_property):
        _, headers = owner
        property_id = make_property(headers)

        response = client.put(f"/properties/{property_id}", json={"market_value": 500000}, headers=headers)
        assert response.status_code == 200
        assert response.json()["property"]["market_value"] == 500000

        response = client.get(f"/properties/{property_id}", headers=headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Apartamento Centro"

    def test_update_property_of_other_user(self, client, owner, intruder, make_property):
        _, owner_headers = owner
        _, intruder_headers = intruder
        property_id = make_property(owner_headers)

        response = client.put(f"/properties/{property_id}", json={"name": "Roubado"}, headers=intruder_headers)
        assert response.status_code == 403

        unchanged = client.get(f"/properties/{property_id}", headers=owner_headers).json()
        assert unchanged["name"] == "Apartamento Centro"

    def test_get_missing_property(self, client, owner):
        _, headers = owner
        response = client.get("/properties/9999", headers=headers)
        assert response.status_code == 404
