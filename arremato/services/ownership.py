
# ARREMATO/backend/arremato/services/ownership.py : politique d'accès unique

from dataclasses import dataclass
from typing import Any
from sqlalchemy.orm import Session
from arremato.auth import CurrentUser
from arremato.errors import PermissionDenied, ResourceNotFound
from arremato.models import models
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grant:
    """Preuve qu'un utilisateur peut agir sur une ressource pour la requête en cours"""
    kind: str
    resource_id: int
    user_id: int
    resource: Any


# kind -> (modèle, appartenance directe par user_id ?)
_RESOURCES = {
    "property": (models.Property, True),
    "transaction": (models.FinancialTransaction, True),
    "task": (models.Task, False),
    "construction": (models.PropertyConstruction, False),
}

_LABELS = {
    "property": "imóvel",
    "transaction": "transação",
    "task": "tarefa",
    "construction": "construção",
}


def _deny(user: CurrentUser, kind: str, resource_id: int):
    logger.warning(f"⛔ Accès refusé: user={user.id} {kind}={resource_id}")
    return PermissionDenied(f"Você não tem permissão para acessar este(a) {_LABELS[kind]}.")


def _owns_property(db: Session, property_id, user_id: int) -> bool:
    if property_id is None:
        return False
    prop = db.query(models.Property.id).filter(
        models.Property.id == property_id,
        models.Property.user_id == user_id
    ).first()
    return prop is not None


def authorize(db: Session, user: CurrentUser, kind: str, resource_id: int) -> Grant:
    """
    Résout la chaîne de propriété d'une ressource et vérifie qu'elle mène à l'utilisateur.

    Directe (resource.user_id) pour les biens et les transactions,
    transitive (resource -> property -> user) pour les tâches et les chantiers.
    Ré-évaluée à chaque requête, aucun cache.

    Raises:
        ResourceNotFound: la ressource n'existe pas
        PermissionDenied: la ressource appartient à un autre utilisateur
    """
    if kind not in _RESOURCES:
        raise ValueError(f"Type de ressource inconnu: {kind}")

    model, direct = _RESOURCES[kind]
    resource = db.query(model).filter(model.id == resource_id).first()
    if resource is None:
        raise ResourceNotFound(f"{_LABELS[kind].capitalize()} não encontrado(a).")

    if direct:
        allowed = resource.user_id == user.id
    else:
        allowed = _owns_property(db, resource.property_id, user.id)

    if not allowed:
        raise _deny(user, kind, resource_id)

    return Grant(kind=kind, resource_id=resource_id, user_id=user.id, resource=resource)


def authorize_property_reference(db: Session, user: CurrentUser, property_id: int) -> Grant:
    """
    Vérifie un property_id référencé par un corps de requête ou un chemin de listing.

    Un bien inexistant est traité comme un refus (403), comme le bien d'un autre utilisateur.
    """
    try:
        return authorize(db, user, "property", property_id)
    except ResourceNotFound:
        raise _deny(user, "property", property_id)
