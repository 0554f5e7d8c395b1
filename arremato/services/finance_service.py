
# ARREMATO/backend/arremato/services/finance_service.py : cycle de vie des transactions financières

from sqlalchemy.orm import Session
from sqlalchemy import func, or_, case
from typing import List, Dict, Optional
from arremato.auth import CurrentUser
from arremato.config import INSTALLMENT_REMAINDER_POLICY
from arremato.errors import ValidationFailed
from arremato.models import models
from arremato.schemas import schemas
from arremato.services.installments import expand_installments
from arremato.services.ownership import authorize, authorize_property_reference
import logging

logger = logging.getLogger(__name__)

Transaction = models.FinancialTransaction


class FinanceService:
    """Service centralisé pour les transactions d'un utilisateur"""

    def __init__(self, db: Session, user: CurrentUser):
        self.db = db
        self.user = user

    def _check_property(self, property_id: Optional[int]):
        if property_id is not None:
            authorize_property_reference(self.db, self.user, property_id)

    def _check_parent(self, parent_id: int, transaction: Optional[Transaction] = None):
        """Le parent doit être une racine de l'utilisateur, les groupes n'ont qu'un niveau"""
        if transaction is not None:
            if parent_id == transaction.id:
                raise ValidationFailed('O campo "parent_id" não pode apontar para a própria transação.')
            has_children = self.db.query(Transaction.id).filter(
                Transaction.parent_id == transaction.id
            ).first() is not None
            if has_children:
                raise ValidationFailed('Uma transação com parcelas não pode ter "parent_id".')

        parent = authorize(self.db, self.user, "transaction", parent_id).resource
        if parent.parent_id is not None:
            raise ValidationFailed('O campo "parent_id" deve apontar para a transação principal do grupo.')

    # ---------- CRÉATION ----------
    def create_finance(self, data: schemas.FinanceCreate) -> Transaction:
        """Enregistrement unique, le bien référencé doit appartenir à l'utilisateur"""
        self._check_property(data.property_id)
        if data.parent_id is not None:
            self._check_parent(data.parent_id)

        transaction = Transaction(**data.model_dump(), user_id=self.user.id)
        self.db.add(transaction)
        self.db.commit()
        self.db.refresh(transaction)
        return transaction

    def create_transaction(self, data: schemas.TransactionCreate) -> Transaction:
        """Variante historique : property_id obligatoire, reçu et source de financement"""
        self._check_property(data.property_id)

        transaction = Transaction(**data.model_dump(), user_id=self.user.id, status="paid", payment_method="cash")
        self.db.add(transaction)
        self.db.commit()
        self.db.refresh(transaction)
        return transaction

    def create_installments(self, data: schemas.InstallmentCreate) -> List[Transaction]:
        """
        Crée un groupe de parcelles en un seul commit.

        La première parcelle est la racine (parent_id NULL), les suivantes pointent
        vers elle. En cas d'échec le rollback n'en laisse aucune.
        """
        self._check_property(data.property_id)

        records = expand_installments(
            data.amount,
            data.total_installments,
            data.date,
            user_id=self.user.id,
            property_id=data.property_id,
            type=data.type,
            category_id=data.category_id,
            category=data.category,
            description=data.description,
            remainder_policy=data.remainder_policy or INSTALLMENT_REMAINDER_POLICY,
        )

        try:
            root = Transaction(**records[0])
            self.db.add(root)
            self.db.flush()  # id de la racine

            children = [Transaction(**record, parent_id=root.id) for record in records[1:]]
            self.db.add_all(children)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        installments = [root] + children
        for installment in installments:
            self.db.refresh(installment)

        logger.info(f"💳 {len(installments)} parcelles créées (groupe {root.id}, user={self.user.id})")
        return installments

    # ---------- MISE À JOUR ----------
    def update_finance(self, transaction_id: int, data: schemas.FinanceUpdate) -> Transaction:
        grant = authorize(self.db, self.user, "transaction", transaction_id)
        changes = data.changes()

        if "property_id" in changes:
            self._check_property(changes["property_id"])

        transaction = grant.resource
        if changes.get("parent_id") is not None:
            self._check_parent(changes["parent_id"], transaction)

        for field, value in changes.items():
            setattr(transaction, field, value)
        transaction.updated_at = models.utcnow()

        self.db.commit()
        self.db.refresh(transaction)
        return transaction

    # ---------- SUPPRESSION ----------
    def delete_finance(self, transaction_id: int) -> Dict:
        """
        Supprime une transaction et son groupe de parcelles.

        Racine (sans parent_id) : elle-même et tous ses enfants.
        Enfant : tout le groupe, racine et parcelles sœurs comprises,
        pas seulement la parcelle demandée.
        """
        grant = authorize(self.db, self.user, "transaction", transaction_id)
        transaction = grant.resource

        is_root = transaction.parent_id is None
        group_id = transaction.id if is_root else transaction.parent_id

        deleted = self.db.query(Transaction).filter(
            or_(Transaction.id == group_id, Transaction.parent_id == group_id)
        ).delete(synchronize_session=False)
        self.db.commit()

        logger.info(f"🗑️ {deleted} transaction(s) supprimée(s) (groupe {group_id}, user={self.user.id})")

        if is_root:
            message = "Transação e todas as parcelas relacionadas foram excluídas com sucesso."
        else:
            message = "Todas as parcelas relacionadas foram excluídas com sucesso."
        return {"message": message, "deleted": deleted}

    # ---------- LECTURE ----------
    def list_user_finances(self) -> List[Transaction]:
        return self.db.query(Transaction).filter(
            Transaction.user_id == self.user.id
        ).order_by(Transaction.date, Transaction.id).all()

    def list_property_finances(self, property_id: int) -> List[Transaction]:
        self._check_property(property_id)
        return self.db.query(Transaction).filter(
            Transaction.property_id == property_id
        ).order_by(Transaction.date, Transaction.id).all()

    def list_property_transactions(self) -> List[Dict]:
        """Transactions des biens de l'utilisateur, avec nom et localisation du bien"""
        rows = self.db.query(Transaction, models.Property).join(
            models.Property, Transaction.property_id == models.Property.id
        ).filter(
            models.Property.user_id == self.user.id
        ).order_by(Transaction.date, Transaction.id).all()

        return [
            {
                **schemas.FinanceOut.model_validate(transaction).model_dump(),
                "properties": {"name": prop.name, "location": prop.location},
            }
            for transaction, prop in rows
        ]

    def get_financial_summary(self) -> Dict:
        """Résumé financier agrégé de l'utilisateur"""
        base = self.db.query(Transaction).filter(Transaction.user_id == self.user.id)

        totals = self.db.query(
            func.coalesce(func.sum(case((Transaction.type == "income", Transaction.amount), else_=0)), 0),
            func.coalesce(func.sum(case((Transaction.type == "expense", Transaction.amount), else_=0)), 0),
            func.coalesce(func.sum(case(
                ((Transaction.type == "expense") & (Transaction.status == "paid"), Transaction.amount), else_=0
            )), 0),
            func.coalesce(func.sum(case(
                ((Transaction.type == "expense") & (Transaction.status == "pending"), Transaction.amount), else_=0
            )), 0),
            func.count(Transaction.id),
        ).filter(Transaction.user_id == self.user.id).one()

        total_income, total_expense, paid_expense, pending_expense, count = totals

        installment_groups = base.filter(
            Transaction.payment_method == "installment",
            Transaction.parent_id.is_(None)
        ).count()

        by_category = self.db.query(
            Transaction.type,
            Transaction.category,
            func.sum(Transaction.amount).label("total"),
            func.count(Transaction.id).label("count")
        ).filter(
            Transaction.user_id == self.user.id
        ).group_by(Transaction.type, Transaction.category).order_by(func.sum(Transaction.amount).desc()).all()

        by_property = self.db.query(
            models.Property.id,
            models.Property.name,
            func.coalesce(func.sum(case((Transaction.type == "income", Transaction.amount), else_=0)), 0),
            func.coalesce(func.sum(case((Transaction.type == "expense", Transaction.amount), else_=0)), 0),
        ).join(
            Transaction, Transaction.property_id == models.Property.id
        ).filter(
            models.Property.user_id == self.user.id,
            Transaction.user_id == self.user.id
        ).group_by(models.Property.id, models.Property.name).order_by(models.Property.id).all()

        return {
            "user_id": self.user.id,
            "total_income": float(total_income),
            "total_expense": float(total_expense),
            "balance": float(total_income) - float(total_expense),
            "paid_expense": float(paid_expense),
            "pending_expense": float(pending_expense),
            "transactions_count": count,
            "installment_groups": installment_groups,
            "by_category": [
                {"type": r[0], "category": r[1] or "uncategorized", "total": float(r[2]), "count": r[3]}
                for r in by_category
            ],
            "by_property": [
                {
                    "property_id": r[0],
                    "name": r[1],
                    "income": float(r[2]),
                    "expense": float(r[3]),
                    "balance": float(r[2]) - float(r[3]),
                }
                for r in by_property
            ],
        }
