
# ARREMATO/backend/arremato/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from arremato.routes import (
    users, properties, tasks, finances, transactions, constructions, categories, loans, processes
)
from arremato.database import check_connection, create_tables
from arremato.errors import register_exception_handlers
from arremato.config import ALLOWED_ORIGINS, ENVIRONMENT, LOG_LEVEL
import logging
import datetime

# Configuration du logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    logger.info("🚀 Démarrage de l'API Arremato...")

    if check_connection():
        logger.info("✅ Connexion à la base de données établie")
        # En production, le schéma est géré hors de l'application
        create_tables()
    else:
        logger.error("❌ Impossible de se connecter à la base de données")

    yield

    # --- SHUTDOWN ---
    logger.info("👋 Arrêt de l'API Arremato")

app = FastAPI(
    title="Arremato API",
    description="API de gestion de patrimoine immobilier: biens, finances, parcelles, tâches et chantiers",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "Inscription, connexion et profil"},
        {"name": "properties", "description": "Biens de l'utilisateur"},
        {"name": "finances", "description": "Transactions, parcelles et résumé financier"},
        {"name": "transactions", "description": "Transactions rattachées à un bien"},
        {"name": "tasks", "description": "Tâches de rénovation"},
        {"name": "constructions", "description": "Chantiers des biens"},
        {"name": "categories", "description": "Catégories et types de dépense"},
        {"name": "loans", "description": "Emprunts"},
        {"name": "processes", "description": "Suivi des démarches par bien"},
    ]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

@app.middleware("http")
async def log_request(request: Request, call_next):
    response = await call_next(request)
    logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
    return response

register_exception_handlers(app)

# Inclusion des routeurs
app.include_router(users.router)
app.include_router(properties.router)
app.include_router(tasks.router)
app.include_router(finances.router)
app.include_router(transactions.router)
app.include_router(constructions.router)
app.include_router(categories.router)
app.include_router(loans.router)
app.include_router(processes.router)

@app.get("/")
def root():
    """
    Racine de l'API - Informations générales
    """
    return {
        "success": True,
        "message": "Arremato backend opérationnel 🚀",
        "version": app.version,
        "environment": ENVIRONMENT,
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "health_check": "/health"
    }

@app.get("/health")
def health_check():
    """
    Endpoint de santé pour le monitoring
    """
    db_status = check_connection()

    return {
        "status": "healthy" if db_status else "unhealthy",
        "database": "connected" if db_status else "disconnected",
        "version": app.version,
        "timestamp": datetime.datetime.now().isoformat()
    }
