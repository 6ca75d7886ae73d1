# bookit/config.py

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Settings for both the token endpoint and the local client."""

    project_name: str = os.getenv("PROJECT_NAME", "BookIt")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("SECRET_KEY", "change-me-later")
    algorithm: str = os.getenv("ALGORITHM", "HS256")
    access_token_expire_days: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

    # Durable client-side store.  Relative sqlite paths resolve against
    # the working directory.
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./bookit.db")

    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    cors_origin: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Read once at import; set SECRET_KEY in any shared deployment.
settings = Settings()
