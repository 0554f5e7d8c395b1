
# ARREMATO/backend/arremato/routes/finances.py

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from arremato.auth import CurrentUser, get_current_user
from arremato.errors import PermissionDenied
from arremato.schemas import schemas
from arremato.database import get_db
from arremato.services.finance_service import FinanceService

router = APIRouter(tags=["finances"])


@router.post("/finances", status_code=201)
def create_finance(
    finance: schemas.FinanceCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Créer une transaction unique (dépense ou revenu)"""
    transaction = FinanceService(db, current_user).create_finance(finance)
    return {"message": "Transação criada com sucesso.", "transaction": schemas.FinanceOut.model_validate(transaction)}


@router.post("/finances/installments", status_code=201)
def create_installment_finance(
    installment: schemas.InstallmentCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Découper un montant en N parcelles mensuelles"""
    transactions = FinanceService(db, current_user).create_installments(installment)
    return {
        "message": "Despesas parceladas criadas com sucesso.",
        "transactions": [schemas.FinanceOut.model_validate(t) for t in transactions]
    }


@router.get("/finances", response_model=List[schemas.FinanceOut])
def get_user_finances(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return FinanceService(db, current_user).list_user_finances()


@router.get("/finances/property/{property_id}", response_model=List[schemas.FinanceOut])
def get_property_finances(
    property_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    return FinanceService(db, current_user).list_property_finances(property_id)


@router.put("/finances/{transaction_id}")
def update_finance(
    transaction_id: int,
    updates: schemas.FinanceUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    transaction = FinanceService(db, current_user).update_finance(transaction_id, updates)
    return {"message": "Transação atualizada com sucesso.", "transaction": schemas.FinanceOut.model_validate(transaction)}


@router.delete("/finances/{transaction_id}")
def delete_finance(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Supprime la transaction et tout son groupe de parcelles"""
    return FinanceService(db, current_user).delete_finance(transaction_id)


@router.get("/financial-summary", response_model=schemas.FinancialSummary)
def get_financial_summary(
    user_id: Optional[int] = Query(None, description="Doit correspondre à l'utilisateur connecté"),
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Résumé financier de l'utilisateur connecté"""
    if user_id is not None and user_id != current_user.id:
        raise PermissionDenied("Você não tem permissão para acessar o resumo financeiro de outro usuário.")
    return FinanceService(db, current_user).get_financial_summary()
