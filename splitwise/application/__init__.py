# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users.authenticate_token import AuthenticateTokenUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase, SignUpParams

__all__ = [
    "AuthenticateTokenUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SignUpParams",
]
