# auth/config.py
"""Authentication configuration and constants"""

from config import APP_CONFIG, ROLES

SESSION_TIMEOUT = APP_CONFIG["session_timeout"]

# Roles offered on the login form
LOGIN_ROLES = [r for r in ROLES if r != "admin"]

# Stored roles that may sign in under another role
ROLE_ALIASES = {"admin": "principal"}

COOKIE_KEYS = [
    "authenticated", "school_code", "mobile", "role", "student_id", "login_time"
]

SESSION_KEYS = [
    "authenticated", "dashboard", "school_code", "mobile", "role", "user_id",
    "username", "student_id", "login_time", "last_activity", "current_view"
]

# UI Messages
MESSAGES = {
    "loading_auth": "Loading authentication...",
    "login_success": "✅ Login successful! Loading your dashboard...",
    "invalid_credentials": "❌ School code, mobile number or password is incorrect.",
    "session_expired": "Session expired. You have been logged out.",
    "logout_failed": "⚠️ Logout failed: {}. Please try again.",
    "subscription_inactive": "🔒 Your subscription is inactive. Please contact the school office to renew.",
}
