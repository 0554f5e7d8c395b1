
# ARREMATO/backend/arremato/routes/tasks.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.models import models as db_models
from arremato.schemas import schemas
from arremato.database import get_db
from arremato.services.ownership import authorize, authorize_property_reference

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _apply(db: Session, task: db_models.Task, changes: dict) -> db_models.Task:
    for field, value in changes.items():
        setattr(task, field, value)
    task.updated_at = db_models.utcnow()
    db.commit()
    db.refresh(task)
    return task


@router.post("", status_code=201)
def create_task(
    task: schemas.TaskCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Créer une tâche sur un bien de l'utilisateur"""
    authorize_property_reference(db, current_user, task.property_id)

    new_task = db_models.Task(**task.model_dump(), user_id=current_user.id)
    db.add(new_task)
    db.commit()
    db.refresh(new_task)
    return {"message": "Tarefa criada com sucesso.", "task": schemas.TaskOut.model_validate(new_task)}


@router.get("", response_model=List[schemas.TaskOut])
def get_tasks(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return db.query(db_models.Task).filter(
        db_models.Task.user_id == current_user.id
    ).order_by(db_models.Task.id).all()


@router.get("/property/{property_id}", response_model=List[schemas.TaskOut])
def get_property_tasks(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Tâches d'un bien précis"""
    authorize_property_reference(db, current_user, property_id)
    return db.query(db_models.Task).filter(
        db_models.Task.property_id == property_id
    ).order_by(db_models.Task.id).all()


@router.get("/{task_id}", response_model=schemas.TaskOut)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return authorize(db, current_user, "task", task_id).resource


@router.put("/{task_id}")
def update_task(
    task_id: int,
    updates: schemas.TaskUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Mise à jour partielle : name, status, priority"""
    task = authorize(db, current_user, "task", task_id).resource
    task = _apply(db, task, updates.changes())
    return {"message": "Tarefa atualizada com sucesso.", "task": schemas.TaskOut.model_validate(task)}


@router.patch("/{task_id}/status")
def update_task_status(
    task_id: int,
    update: schemas.TaskStatusUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    task = authorize(db, current_user, "task", task_id).resource
    task = _apply(db, task, update.changes())
    return {"message": "Status da tarefa atualizado com sucesso.", "task": schemas.TaskOut.model_validate(task)}


@router.delete("/{task_id}")
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    task = authorize(db, current_user, "task", task_id).resource
    db.delete(task)
    db.commit()
    return {"message": "Tarefa excluída com sucesso."}
