# salon_backend/config/settings.py
import logging
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _build_database_url() -> str:
    url = os.getenv("DATABASE_URL", "").strip()
    if url:
        return url

    db_host = os.getenv("DB_HOST", "").strip()
    db_name = os.getenv("DB_NAME", "").strip()
    db_user = os.getenv("DB_USER", "").strip()
    db_password = os.getenv("DB_PASSWORD", "").strip()
    db_port = os.getenv("DB_PORT", "1433").strip()

    if not all([db_host, db_name, db_user, db_password]):
        return "sqlite:///./salon.db"

    odbc_str = (
        "DRIVER=ODBC Driver 17 for SQL Server;"
        f"SERVER={db_host},{db_port};"
        f"DATABASE={db_name};"
        f"UID={db_user};"
        f"PWD={db_password};"
        "Encrypt=yes;"
        "TrustServerCertificate=yes;"
        "Connection Timeout=30;"
    )
    return "mssql+pyodbc:///?odbc_connect=" + quote_plus(odbc_str)


DATABASE_URL = _build_database_url()

# local | firebase
IDENTITY_PROVIDER = os.getenv("IDENTITY_PROVIDER", "local").strip().lower()
FIREBASE_API_KEY = os.getenv("FIREBASE_API_KEY", "").strip()
FIREBASE_AUTH_URL = os.getenv(
    "FIREBASE_AUTH_URL", "https://identitytoolkit.googleapis.com/v1"
).rstrip("/")
FIREBASE_TIMEOUT = int(os.getenv("FIREBASE_TIMEOUT", "10"))

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
TOKEN_MAX_AGE = int(os.getenv("TOKEN_MAX_AGE", "86400"))

DEFAULT_SALON_ID = os.getenv("DEFAULT_SALON_ID", "default-salon-id")
MIN_CANCEL_HOURS = int(os.getenv("MIN_CANCEL_HOURS", "24"))
MIN_BOOKING_BUFFER_MINUTES = int(os.getenv("MIN_BOOKING_BUFFER_MINUTES", "30"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
