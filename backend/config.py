import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    max_upload_size_mb: int = 5
    max_resume_chars: int = 50000
    rate_limit: str = "20/minute"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
    ]
    debug: bool = False

    # Profile storage
    storage_backend: str = "auto"  # "auto" | "mongo" | "memory"
    mongodb_uri: str = ""
    mongodb_database: str = "quick_teams"
    mongodb_collection: str = "users"
    mongodb_timeout_ms: int = 2000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
