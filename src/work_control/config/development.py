import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "20"))

LATE_THRESHOLD_MINUTES = int(os.getenv("LATE_THRESHOLD_MINUTES", "5"))
TRAILING_WINDOW_DAYS = int(os.getenv("TRAILING_WINDOW_DAYS", "30"))
MAX_PHOTO_BYTES = int(os.getenv("MAX_PHOTO_BYTES", str(2 * 1024 * 1024)))

# "overlapping" counts a day without logs as absent even if its status is present
DAY_COUNTING_MODE = os.getenv("DAY_COUNTING_MODE", "overlapping")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
