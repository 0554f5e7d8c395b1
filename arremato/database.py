
# ARREMATO/backend/arremato/database.py

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from arremato.config import DATABASE_URL
import logging

logger = logging.getLogger(__name__)

# SQLite exige check_same_thread=False avec FastAPI
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Création de la connexion à la base de données
try:
    engine = create_engine(
        DATABASE_URL,
        connect_args=connect_args,
        pool_pre_ping=True,  # Vérifie que la connexion est vivante avant utilisation
        echo=False  # Met à True pour voir les requêtes SQL dans la console
    )
except Exception as e:
    logger.error(f"❌ Erreur de configuration de la base de données: {e}")
    raise

# Session pour interagir avec la base
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base pour créer les modèles (tables)
Base = declarative_base()

# Dependency pour FastAPI
def get_db():
    """
    Dépendance FastAPI pour obtenir une session de base de données.
    À utiliser dans les routes avec: db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def create_tables():
    """Crée toutes les tables définies dans les modèles"""
    # Import nécessaire pour enregistrer les modèles sur Base.metadata
    from arremato.models import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables créées/vérifiées avec succès")

def check_connection():
    """Vérifie que la connexion à la base fonctionne"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"❌ Erreur de connexion: {e}")
        return False
