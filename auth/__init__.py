# auth/__init__.py
"""Authentication module initialization"""

from .login import login
from .logout import logout
from .session_manager import SessionManager
from .validators import validate_credentials, validate_session_cookies, validate_user_input

__all__ = [
    'login',
    'logout',
    'SessionManager',
    'validate_credentials',
    'validate_session_cookies',
    'validate_user_input'
]
