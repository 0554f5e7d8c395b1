
# ARREMATO/backend/arremato/services/installments.py : découpage d'une dépense en parcelles

from datetime import date
from typing import List, Dict, Optional
from arremato.errors import ValidationFailed
import calendar


def add_months(start: date, months: int) -> date:
    """Avance de `months` mois calendaires, le jour est borné à la fin du mois cible"""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def split_amount(amount: float, total_installments: int, remainder_policy: str = "none") -> List[float]:
    """
    Montant de chaque parcelle.

    "none" : division flottante brute, la somme peut différer légèrement de `amount`.
    "last" : parcelles tronquées au centime, la dernière absorbe les centimes restants.
    """
    if remainder_policy == "none":
        value = amount / total_installments
        return [value] * total_installments

    if remainder_policy == "last":
        # calcul en centimes entiers, chaque parcelle vaut au moins un centime
        cents = round(amount * 100)
        if cents < total_installments:
            raise ValidationFailed('O campo "amount" é pequeno demais para o número de parcelas.')
        base = cents // total_installments
        values = [base / 100] * (total_installments - 1)
        values.append((base + cents % total_installments) / 100)
        return values

    raise ValidationFailed(f'Política de resto desconhecida: "{remainder_policy}".')


def expand_installments(
    amount: float,
    total_installments: int,
    start_date: date,
    *,
    user_id: int,
    property_id: Optional[int] = None,
    type: str = "expense",
    category_id: Optional[int] = None,
    category: Optional[str] = None,
    description: Optional[str] = None,
    remainder_policy: str = "none",
) -> List[Dict]:
    """
    Produit les `total_installments` enregistrements d'un groupe de parcelles.

    La parcelle i (1..N) vaut amount / N, échoit à start_date + (i-1) mois,
    statut "pending" et moyen de paiement "installment". Le lien parent/enfant
    est posé à l'insertion (voir FinanceService.create_installments).
    """
    if isinstance(total_installments, bool) or not isinstance(total_installments, int) or total_installments <= 0:
        raise ValidationFailed('O campo "total_installments" deve ser um número inteiro maior que zero.')
    if amount is None or amount <= 0:
        raise ValidationFailed('O campo "amount" deve ser um número válido maior que zero.')

    values = split_amount(amount, total_installments, remainder_policy)

    return [
        {
            "user_id": user_id,
            "property_id": property_id,
            "type": type,
            "category_id": category_id,
            "category": category,
            "date": add_months(start_date, i - 1),
            "amount": values[i - 1],
            "status": "pending",
            "payment_method": "installment",
            "total_installments": total_installments,
            "current_installment": i,
            "installment_value": values[i - 1],
            "description": description,
        }
        for i in range(1, total_installments + 1)
    ]
