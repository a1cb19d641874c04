SECRET_KEY = "test-secret"

API_BASE_URL = "http://backend.test"
API_TIMEOUT = 5.0

LATE_THRESHOLD_MINUTES = 5
TRAILING_WINDOW_DAYS = 30
MAX_PHOTO_BYTES = 2 * 1024 * 1024
DAY_COUNTING_MODE = "overlapping"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
