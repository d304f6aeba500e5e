import os

ENVIRONMENT = "production"
DEBUG = False

PORT = int(os.getenv("PORT", "3001"))
API_PREFIX = os.getenv("API_PREFIX", "/api")

DATABASE_URL = os.getenv("DATABASE_URL", "")
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}
DB_SSL = bool(int(os.getenv("DB_SSL", "1")))
# Certificate verification stays on unless explicitly disabled (logged as a warning).
DB_SSL_VERIFY = bool(int(os.getenv("DB_SSL_VERIFY", "1")))
DB_SSL_CA = os.getenv("DB_SSL_CA") or None
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "10"))

CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", os.getenv("FRONTEND_URL", ""))
CORS_ALLOWED_ORIGIN_PATTERNS = os.getenv("CORS_ALLOWED_ORIGIN_PATTERNS", "")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
