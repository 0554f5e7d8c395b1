
# ARREMATO/backend/arremato/routes/transactions.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from arremato.auth import CurrentUser, get_current_user
from arremato.schemas import schemas
from arremato.database import get_db
from arremato.services.finance_service import FinanceService

router = APIRouter(prefix="/transactions", tags=["transactions"])

@router.post("", status_code=201)
def create_transaction(
    transaction: schemas.TransactionCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Créer une transaction rattachée à un bien (protégée par JWT)"""
    new_tx = FinanceService(db, current_user).create_transaction(transaction)
    return {"message": "Transação criada com sucesso.", "transaction": schemas.FinanceOut.model_validate(new_tx)}

@router.get("", response_model=List[schemas.TransactionWithProperty])
def get_transactions(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Transactions des biens de l'utilisateur, avec le nom et la localisation du bien"""
    return FinanceService(db, current_user).list_property_transactions()
