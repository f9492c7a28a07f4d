"""Authentication use cases."""

from .authenticate import AuthContext, AuthenticateRequest, AuthenticateUseCase
from .login import LoginRequest, LoginUseCase
from .signup import AuthTokenResponse, SignupRequest, SignupUseCase
from .verify_token import VerifyTokenRequest, VerifyTokenResponse, VerifyTokenUseCase

__all__ = [
    "AuthContext",
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "AuthTokenResponse",
    "LoginRequest",
    "LoginUseCase",
    "SignupRequest",
    "SignupUseCase",
    "VerifyTokenRequest",
    "VerifyTokenResponse",
    "VerifyTokenUseCase",
]
