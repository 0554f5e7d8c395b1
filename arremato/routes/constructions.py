
# ARREMATO/backend/arremato/routes/constructions.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.models import models as db_models
from arremato.schemas import schemas
from arremato.database import get_db
from arremato.services.ownership import authorize, authorize_property_reference

router = APIRouter(prefix="/constructions", tags=["constructions"])

@router.post("", status_code=201)
def create_construction(
    construction: schemas.ConstructionCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Créer un chantier sur un bien de l'utilisateur"""
    authorize_property_reference(db, current_user, construction.property_id)

    new_construction = db_models.PropertyConstruction(**construction.model_dump())
    db.add(new_construction)
    db.commit()
    db.refresh(new_construction)
    return {
        "message": "Construção criada com sucesso.",
        "construction": schemas.ConstructionOut.model_validate(new_construction)
    }

@router.get("", response_model=List[schemas.ConstructionOut])
def get_constructions(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Chantiers de tous les biens de l'utilisateur"""
    return db.query(db_models.PropertyConstruction).join(
        db_models.Property
    ).filter(
        db_models.Property.user_id == current_user.id
    ).order_by(db_models.PropertyConstruction.id).all()

@router.get("/property/{property_id}", response_model=List[schemas.ConstructionOut])
def get_constructions_by_property(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    authorize_property_reference(db, current_user, property_id)
    return db.query(db_models.PropertyConstruction).filter(
        db_models.PropertyConstruction.property_id == property_id
    ).order_by(db_models.PropertyConstruction.id).all()

@router.put("/{construction_id}")
def update_construction(
    construction_id: int,
    updates: schemas.ConstructionUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    construction = authorize(db, current_user, "construction", construction_id).resource

    for field, value in updates.changes().items():
        setattr(construction, field, value)
    construction.updated_at = db_models.utcnow()

    db.commit()
    db.refresh(construction)
    return {
        "message": "Construção atualizada com sucesso.",
        "construction": schemas.ConstructionOut.model_validate(construction)
    }

@router.delete("/{construction_id}")
def delete_construction(
    construction_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    construction = authorize(db, current_user, "construction", construction_id).resource
    db.delete(construction)
    db.commit()
    return {"message": "Construção excluída com sucesso."}
