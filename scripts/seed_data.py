# ARREMATO/backend/scripts/seed_data.py : script pour générer des données de démo

#!/usr/bin/env python
"""Script pour générer un portefeuille de démo réaliste"""

import random
import sys
import os
from datetime import date, timedelta
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from arremato.database import SessionLocal, create_tables
from arremato.models import models
from arremato.auth import hash_password, CurrentUser
from arremato.schemas import schemas
from arremato.services.finance_service import FinanceService

DEMO_EMAIL = "demo@arremato.com"

def generate_test_data(db):
    """Génère un utilisateur, deux biens et leurs finances, tâches et chantiers"""
    demo_user = db.query(models.User).filter(models.User.email == DEMO_EMAIL).first()
    if demo_user:
        print("ℹ️ Données de démo déjà présentes")
        return demo_user

    demo_user = models.User(
        name="Demo",
        email=DEMO_EMAIL,
        password=hash_password("demo123")
    )
    db.add(demo_user)
    db.commit()
    db.refresh(demo_user)

    identity = CurrentUser(id=demo_user.id, email=demo_user.email)
    service = FinanceService(db, identity)

    # Deux biens : un pour la revente, un pour la location
    properties = []
    for name, purpose in [("Apartamento Centro", "sale"), ("Casa Praia", "rental")]:
        prop = models.Property(
            user_id=demo_user.id,
            name=name,
            location="São Paulo",
            purpose=purpose,
            bid_value=random.randint(150000, 400000),
            acquisition_date=date.today() - timedelta(days=180)
        )
        db.add(prop)
        properties.append(prop)
    db.commit()

    categories = ["Reforma", "Condomínio", "IPTU", "Aluguel"]

    for prop in properties:
        db.refresh(prop)

        # Quelques dépenses et revenus ponctuels
        for months_ago in range(6):
            service.create_finance(schemas.FinanceCreate(
                property_id=prop.id,
                type=random.choice(["expense", "income"]),
                category=random.choice(categories),
                date=date.today() - timedelta(days=30 * months_ago),
                amount=random.randint(500, 5000),
                status="paid"
            ))

        # Une rénovation payée en 12 parcelles
        service.create_installments(schemas.InstallmentCreate(
            property_id=prop.id,
            category="Reforma",
            date=date.today(),
            amount=12000,
            total_installments=12,
            description="Reforma parcelada"
        ))

        for task_name in ["Pintura", "Elétrica", "Hidráulica"]:
            db.add(models.Task(
                user_id=demo_user.id,
                property_id=prop.id,
                name=task_name,
                status=random.choice(["pending", "in progress", "completed"]),
                priority=random.choice(["low", "medium", "high"])
            ))

        db.add(models.PropertyConstruction(
            property_id=prop.id,
            budget=30000,
            spent=random.randint(0, 30000),
            delivery_days=90,
            responsible_name="Construtora Demo",
            status="in progress"
        ))

    db.commit()
    print(f"✅ Données de démo générées pour {DEMO_EMAIL}")
    return demo_user

if __name__ == "__main__":
    create_tables()
    session = SessionLocal()
    try:
        generate_test_data(session)
    finally:
        session.close()
