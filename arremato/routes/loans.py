
# ARREMATO/backend/arremato/routes/loans.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.models import models as db_models
from arremato.schemas import schemas
from arremato.database import get_db

router = APIRouter(prefix="/loans", tags=["loans"])

@router.post("", status_code=201)
def create_loan(
    loan: schemas.LoanCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Enregistrer un emprunt de l'utilisateur connecté"""
    new_loan = db_models.Loan(**loan.model_dump(), user_id=current_user.id)
    db.add(new_loan)
    db.commit()
    db.refresh(new_loan)
    return {"message": "Empréstimo criado com sucesso.", "loan": schemas.LoanOut.model_validate(new_loan)}

@router.get("", response_model=List[schemas.LoanOut])
def get_loans(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return db.query(db_models.Loan).filter(
        db_models.Loan.user_id == current_user.id
    ).order_by(db_models.Loan.id).all()
