import os

ENVIRONMENT = "testing"
DEBUG = False
TESTING = True

PORT = 3001
API_PREFIX = "/api"

DATABASE_URL = os.getenv("DATABASE_URL", "")
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}
DB_SSL = False
DB_SSL_VERIFY = True
DB_SSL_CA = None
DB_POOL_SIZE = 2
DB_POOL_TIMEOUT = 2.0

CORS_ALLOWED_ORIGINS = "http://localhost:5173"
CORS_ALLOWED_ORIGIN_PATTERNS = r"https://.*\.vercel\.app"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

LOG_JSON = False
LOG_LEVEL = "WARNING"
