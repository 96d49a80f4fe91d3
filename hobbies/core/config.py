import os

DEFAULT_DATABASE_URL = "postgresql+psycopg2://postgres:postgres@db:5432/hobbies"

class Settings:
    PROJECT_NAME: str = "Hobbies"
    DATABASE_URL: str = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

    # database timeouts
    DB_CONNECT_TIMEOUT: int = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))  # seconds
    DB_STATEMENT_TIMEOUT_MS: int = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "5000"))  # postgres only

    # create tables from model metadata on startup instead of running alembic
    AUTO_CREATE_SCHEMA: bool = os.getenv("AUTO_CREATE_SCHEMA", "false").lower() in ("1", "true", "yes")

    # flash messages live in a signed session cookie
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me")
    SESSION_COOKIE: str = os.getenv("SESSION_COOKIE", "hobbies_session")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")  # empty means stdout only

    # dev server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

settings = Settings()
