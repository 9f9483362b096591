"""
Application services built on the entity registry.
"""

from astrogrid.application.services.user_service import (
    AuthError,
    EmailAlreadyInUse,
    InvalidCredentials,
    UserNotFound,
    UserService,
)

__all__ = ["AuthError", "EmailAlreadyInUse", "InvalidCredentials", "UserNotFound", "UserService"]
