#config/settings

import os
from dotenv import load_dotenv

# Load variables from the .env file
load_dotenv()

# JWT
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_DAYS = int(os.getenv("ACCESS_TOKEN_DAYS", "3"))


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./nightnest.db")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Analytics
ANALYTICS_WINDOW_DAYS = int(os.getenv("ANALYTICS_WINDOW_DAYS", "30"))
ANALYTICS_MAX_DAYS = int(os.getenv("ANALYTICS_MAX_DAYS", "14"))

# Night window used to count night wakings (inclusive hours)
NIGHT_START_HOUR = int(os.getenv("NIGHT_START_HOUR", "20"))
NIGHT_END_HOUR = int(os.getenv("NIGHT_END_HOUR", "7"))
NIGHT_WAKING_MAX_MINUTES = int(os.getenv("NIGHT_WAKING_MAX_MINUTES", "240"))
