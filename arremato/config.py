
# ARREMATO/backend/arremato/config.py

import os
from dotenv import load_dotenv
from pathlib import Path

# Dossier contenant ce fichier (arremato/)
BASE_DIR = Path(__file__).parent.absolute()
env_path = BASE_DIR / '.env'

# Charge les variables depuis le fichier .env s'il existe
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
    print(f"✅ Fichier .env chargé depuis: {env_path}")

# ============================================
# CONFIGURATION ENVIRONNEMENT
# ============================================
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# ============================================
# CONFIGURATION BASE DE DONNÉES
# ============================================
DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    if ENVIRONMENT == "production":
        raise ValueError("DATABASE_URL must be set in production")
    # SQLite local pour le développement
    DATABASE_URL = "sqlite:///./arremato.db"

# ============================================
# CONFIGURATION JWT / AUTH
# ============================================
SECRET_KEY = os.getenv("SECRET_KEY", "change_this_secret_key_in_production")
if SECRET_KEY == "change_this_secret_key_in_production" and ENVIRONMENT == "production":
    raise ValueError("SECRET_KEY must be changed in production")

ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))  # 1 heure
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# ============================================
# CONFIGURATION PARCELLES
# ============================================
# "none": division brute, "last": la dernière parcelle absorbe l'arrondi
INSTALLMENT_REMAINDER_POLICY = os.getenv("INSTALLMENT_REMAINDER_POLICY", "none").lower()
if INSTALLMENT_REMAINDER_POLICY not in ("none", "last"):
    raise ValueError("INSTALLMENT_REMAINDER_POLICY must be 'none' or 'last'")

# ============================================
# CONFIGURATION CORS (Frontend)
# ============================================
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")

# ============================================
# LOGGING
# ============================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ============================================
# FONCTIONS UTILITAIRES
# ============================================
def is_production():
    """Vérifie si on est en production"""
    return ENVIRONMENT == "production"
