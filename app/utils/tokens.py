# app/utils/tokens.py
import jwt
from datetime import datetime, timedelta
from config.settings import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_DAYS


def jwt_for_user(email: str) -> str:
    payload = {
        "sub": email,
        "exp": datetime.utcnow() + timedelta(days=ACCESS_TOKEN_DAYS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)
