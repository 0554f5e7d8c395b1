
# ARREMATO/backend/arremato/routes/users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from arremato import auth
from arremato.auth import CurrentUser, get_current_user
from arremato.errors import AuthenticationFailed, ResourceNotFound, ValidationFailed
from arremato.models import models as db_models
from arremato.schemas.schemas import UserOut, UserCreate, UserLogin, UserUpdate, LoginResponse
from arremato.database import get_db
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

# Même réponse pour un email inconnu et un mauvais mot de passe
INVALID_CREDENTIALS = "Credenciais inválidas."


@router.post("/users", status_code=201)
def register(user: UserCreate, db: Session = Depends(get_db)):
    """Inscription (route ouverte)"""
    db_user = db.query(db_models.User).filter(db_models.User.email == user.email).first()
    if db_user:
        raise ValidationFailed("Email já cadastrado.")

    new_user = db_models.User(
        name=user.name,
        email=user.email,
        password=auth.hash_password(user.password)
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info(f"👤 Nouvel utilisateur: id={new_user.id}")
    return {"message": "Usuário criado com sucesso.", "user": UserOut.model_validate(new_user)}


@router.post("/login", response_model=LoginResponse)
@router.post("/auth/login", response_model=LoginResponse, include_in_schema=False)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Connexion : retourne un token valable 1 heure"""
    db_user = db.query(db_models.User).filter(db_models.User.email == credentials.email).first()
    if not db_user or not auth.verify_password(credentials.password, db_user.password):
        raise AuthenticationFailed(INVALID_CREDENTIALS)

    token = auth.create_access_token({"id": db_user.id, "email": db_user.email})
    return {"token": token, "user": UserOut.model_validate(db_user)}


@router.get("/users", response_model=UserOut)
def get_profile(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Profil de l'utilisateur connecté (sans mot de passe)"""
    db_user = db.query(db_models.User).filter(db_models.User.id == current_user.id).first()
    if not db_user:
        raise ResourceNotFound("Usuário não encontrado.", envelope_key="message")
    return db_user


@router.put("/users")
def update_profile(
    updates: UserUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Mise à jour partielle : name, email, password"""
    db_user = db.query(db_models.User).filter(db_models.User.id == current_user.id).first()
    if not db_user:
        raise ResourceNotFound("Usuário não encontrado.", envelope_key="message")

    changes = updates.changes()
    if "email" in changes and changes["email"] != db_user.email:
        taken = db.query(db_models.User).filter(db_models.User.email == changes["email"]).first()
        if taken:
            raise ValidationFailed("Email já cadastrado.")
    if "password" in changes:
        changes["password"] = auth.hash_password(changes["password"])

    for field, value in changes.items():
        setattr(db_user, field, value)

    db.commit()
    db.refresh(db_user)
    return {"message": "Usuário atualizado com sucesso.", "user": UserOut.model_validate(db_user)}
