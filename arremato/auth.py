
# ARREMATO/backend/arremato/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from arremato.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES, BCRYPT_ROUNDS
from arremato.errors import AuthenticationFailed

# auto_error=False : on veut un 401 (et notre enveloppe) quand le header manque
security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identité portée par le token, passée explicitement aux routes et services"""
    id: int
    email: str


# ---------- MOTS DE PASSE ----------
def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # hash stocké illisible
        return False


# ---------- TOKENS ----------
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Signe {id, email} avec une expiration (1 heure par défaut)"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Vérifie le token et retourne son contenu.

    Raises:
        AuthenticationFailed: token expiré, invalide ou sans identité
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationFailed("Token inválido ou expirado.")
    except jwt.InvalidTokenError:
        raise AuthenticationFailed("Token inválido ou expirado.")

    if payload.get("id") is None or payload.get("email") is None:
        raise AuthenticationFailed("Token inválido ou expirado.")
    return payload


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """Dépendance FastAPI : exige un header Authorization: Bearer <token>"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationFailed("Token não fornecido.")

    payload = decode_access_token(credentials.credentials)
    return CurrentUser(id=payload["id"], email=payload["email"])
