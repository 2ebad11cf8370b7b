# app_sections/__init__.py
"""
App sections package
Contains the role dashboards and shared presentation pieces
"""

# Import all sections for easy access
from . import skeletons
from . import bottom_nav
from . import notice_board
from . import leave_requests
from . import principal_dashboard
from . import teacher_dashboard
from . import parent_dashboard
from . import student_dashboard
from . import driver_dashboard
from . import user_profile

__all__ = [
    'skeletons',
    'bottom_nav',
    'notice_board',
    'leave_requests',
    'principal_dashboard',
    'teacher_dashboard',
    'parent_dashboard',
    'student_dashboard',
    'driver_dashboard',
    'user_profile'
]
