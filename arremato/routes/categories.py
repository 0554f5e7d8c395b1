
# ARREMATO/backend/arremato/routes/categories.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.models import models as db_models
from arremato.schemas import schemas
from arremato.database import get_db

router = APIRouter(tags=["categories"])

@router.get("/categories", response_model=List[schemas.CategoryOut])
def get_categories(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return db.query(db_models.Category).order_by(db_models.Category.id).all()

@router.post("/categories", status_code=201)
def create_category(
    category: schemas.CategoryCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    new_category = db_models.Category(**category.model_dump())
    db.add(new_category)
    db.commit()
    db.refresh(new_category)
    return {"message": "Categoria criada com sucesso.", "category": schemas.CategoryOut.model_validate(new_category)}

@router.get("/expense-types", response_model=List[schemas.ExpenseTypeOut])
def get_expense_types(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Types de dépense (données de référence)"""
    return db.query(db_models.ExpenseType).order_by(db_models.ExpenseType.id).all()
