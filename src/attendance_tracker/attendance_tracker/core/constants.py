"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SERVICE_NAME = "Attendance Tracker API"
DEFAULT_PORT = 3001
DEFAULT_API_PREFIX = "/api"

DEFAULT_POOL_NAME = "attendance_tracker"
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_TIMEOUT_SECONDS = 10.0
MAX_POOL_SIZE = 32  # mysql.connector.pooling.CNX_POOL_MAXSIZE

MAX_EMP_ID_LENGTH = 64
MAX_NAME_LENGTH = 255
MAX_ATTENDANCE_TYPE_LENGTH = 32
