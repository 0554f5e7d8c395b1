
# ARREMATO/backend/arremato/routes/processes.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.models import models as db_models
from arremato.schemas import schemas
from arremato.database import get_db
from arremato.services.ownership import authorize_property_reference

router = APIRouter(prefix="/processes", tags=["processes"])

@router.post("", status_code=201)
def create_process(
    process: schemas.ProcessCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Suivi d'une démarche (juridique, administrative...) sur un bien"""
    authorize_property_reference(db, current_user, process.property_id)

    new_process = db_models.Process(**process.model_dump())
    db.add(new_process)
    db.commit()
    db.refresh(new_process)
    return {"message": "Processo criado com sucesso.", "process": schemas.ProcessOut.model_validate(new_process)}

@router.get("/property/{property_id}", response_model=List[schemas.ProcessOut])
def get_property_processes(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    authorize_property_reference(db, current_user, property_id)
    return db.query(db_models.Process).filter(
        db_models.Process.property_id == property_id
    ).order_by(db_models.Process.id).all()
