# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import (
    DEV_JWT_SECRET,
    MIN_PRODUCTION_SECRET_BYTES,
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "DEV_JWT_SECRET",
    "MIN_PRODUCTION_SECRET_BYTES",
    "load_config",
]
