# ARREMATO/backend/tests/conftest.py : configuration pour les tests

import sys
import os
from pathlib import Path

# Ajoute le dossier parent au PYTHONPATH
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))

# Hash rapide pour les tests
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from arremato.main import app
from arremato.database import Base, get_db

# Base de données de test
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def db_session():
    """Tables fraîches pour chaque test"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client(db_session):
    """Client de test branché sur la base de test"""
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def make_user(client):
    """Fabrique : inscrit un utilisateur et retourne (id, headers)"""
    def _make_user(email="owner@example.com", password="Test123!", name="Owner"):
        response = client.post("/users", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201
        user_id = response.json()["user"]["id"]

        login = client.post("/login", json={"email": email, "password": password})
        assert login.status_code == 200
        token = login.json()["token"]
        return user_id, {"Authorization": f"Bearer {token}"}
    return _make_user

@pytest.fixture
def owner(make_user):
    return make_user()

@pytest.fixture
def intruder(make_user):
    return make_user(email="intruder@example.com", name="Intruder")

@pytest.fixture
def make_property(client):
    """Fabrique : crée un bien pour les headers donnés et retourne son id"""
    def _make_property(headers, name="Apartamento Centro", **fields):
        response = client.post("/properties", json={"name": name, **fields}, headers=headers)
        assert response.status_code == 201
        return response.json()["property"]["id"]
    return _make_property
