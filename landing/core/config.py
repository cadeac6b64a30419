import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./landing.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

USER_STATUS_ACTIVE = "active"
USER_STATUS_NEW = "new"
DEFAULT_USER_STATUS = os.getenv("DEFAULT_USER_STATUS", USER_STATUS_ACTIVE)

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "60"))

def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
    if not 4 <= BCRYPT_ROUNDS <= 31:
        raise RuntimeError("BCRYPT_ROUNDS must be between 4 and 31.")
