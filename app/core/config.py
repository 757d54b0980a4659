"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Key-value storage
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./ticketing.db")
    USE_FIREBASE: bool = os.getenv("USE_FIREBASE", "false").lower() in ("1", "true", "yes")
    FIREBASE_CREDENTIALS_JSON: str | None = os.getenv("FIREBASE_CREDENTIALS_JSON")
    FIREBASE_CREDENTIALS_FILE: str | None = os.getenv("FIREBASE_CREDENTIALS_FILE")
    FIREBASE_CREDENTIALS_B64: str | None = os.getenv("FIREBASE_CREDENTIALS_B64")
    FIRESTORE_COLLECTION: str = os.getenv("FIRESTORE_COLLECTION", "kv_store")

    # Admin bootstrap credentials
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@rizia.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Security
    PUBLIC_ANON_KEY: str = os.getenv("PUBLIC_ANON_KEY", "public-anon-key")
    SESSION_TTL_SECONDS: int = int(os.getenv("SESSION_TTL_SECONDS", str(24 * 60 * 60)))
    PASSWORD_HASH_ITERATIONS: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "100000"))

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    class Config:
        env_file = ".env"

settings = Settings()

def get_settings() -> Settings:
    """FastAPI dependency returning the active settings"""
    return settings
