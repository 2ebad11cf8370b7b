# config.py
from dotenv import load_dotenv
import os

# Load variables from .env into environment
load_dotenv()

# Application Configuration
APP_CONFIG = {
    "app_name": "School Dashboard".upper(),
    "version": "1.0.0",
    "page_title": "School Dashboard",
    "cookie_prefix": "school_dashboard_app",
    "session_timeout": 3600,  # 1 hour in seconds
    "default_total_periods": 8,
    "attendance_history_limit": 60,
    "ist_offset_minutes": 330,  # UTC+05:30
}

# Environment Configuration
ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')
DEBUG = os.getenv('DEBUG', 'True').lower() == 'true'
COOKIE_PASSWORD = os.getenv('COOKIE_PASSWORD', 'fallback-secure-password-change-in-production')

# Backend Configuration
SUPABASE_CONFIG = {
    "url": os.getenv('SUPABASE_URL', ''),
    "key": os.getenv('SUPABASE_KEY', ''),
}

# Roles known to the backend
ROLES = ["principal", "admin", "teacher", "parent", "student", "driver"]
CLIENT_ROLES = ["parent", "student"]

# Logging Configuration
LOG_CONFIG = {
    "level": os.getenv('LOG_LEVEL', 'INFO'),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "dir": "logs",
    "file": "logs/app.log",
    "error_file": "logs/error.log",
    "max_size": 10 * 1024 * 1024,  # 10MB
    "backup_count": 5
}

# Security Configuration
SECURITY_CONFIG = {
    "session_timeout_enabled": True
}
