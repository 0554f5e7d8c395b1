
# ARREMATO/backend/arremato/routes/properties.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.models import models as db_models
from arremato.schemas import schemas
from arremato.database import get_db
from arremato.services.ownership import authorize

router = APIRouter(tags=["properties"])


def _user_properties(db: Session, user_id: int):
    return db.query(db_models.Property).filter(
        db_models.Property.user_id == user_id
    ).order_by(db_models.Property.id).all()


@router.post("/properties", status_code=201)
def create_property(
    prop: schemas.PropertyCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Cadastrer un bien pour l'utilisateur connecté"""
    new_property = db_models.Property(
        **prop.model_dump(),
        user_id=current_user.id
    )
    db.add(new_property)
    db.commit()
    db.refresh(new_property)
    return {"message": "Imóvel cadastrado com sucesso.", "property": schemas.PropertyOut.model_validate(new_property)}


@router.get("/properties", response_model=List[schemas.PropertyOut])
def get_properties(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return _user_properties(db, current_user.id)


@router.get("/user-properties", response_model=List[schemas.PropertyOut])
def get_user_properties(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Alias historique de GET /properties"""
    return _user_properties(db, current_user.id)


@router.get("/properties/{property_id}", response_model=schemas.PropertyOut)
def get_property(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return authorize(db, current_user, "property", property_id).resource


@router.put("/properties/{property_id}")
def update_property(
    property_id: int,
    updates: schemas.PropertyUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    prop = authorize(db, current_user, "property", property_id).resource

    for field, value in updates.changes().items():
        setattr(prop, field, value)
    prop.updated_at = db_models.utcnow()

    db.commit()
    db.refresh(prop)
    return {"message": "Imóvel atualizado com sucesso.", "property": schemas.PropertyOut.model_validate(prop)}
