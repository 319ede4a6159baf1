"""
Application settings and configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Application
    APP_NAME = os.getenv("APP_NAME", "Hotel Admin")
    VERSION = "1.0.0"
    DEBUG = os.getenv("DEBUG", "False") == "True"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Security
    SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")
    ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 12))  # one shift

    # CORS
    ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "ALLOWED_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000",
        ).split(",")
        if origin.strip()
    ]

    # Datetimes are stored in UTC and rendered in the hotel's local zone
    TIMEZONE = os.getenv("TIMEZONE", "Europe/London")

    # Upper bound for list endpoints
    MAX_PAGE_SIZE = 500

    # File Uploads
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(os.getcwd(), "uploads"))

    # Bootstrap admin account (see scripts/seed_admin.py)
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@grandhotel.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

settings = Settings()
