"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the portal's authentication pages.

Each page class encapsulates:
    - Its route
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .auth_form_page import AuthFormPage
from .dashboard_page import DashboardPage
from .home_page import HomePage
from .signin_page import SignInPage
from .signup_page import SignUpPage

__all__ = [
    "AuthFormPage",
    "DashboardPage",
    "HomePage",
    "SignInPage",
    "SignUpPage",
]
