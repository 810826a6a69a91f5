# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Configuration management for bcrypt_password.

This module handles configuration from environment variables.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.
    
    Assumptions:
    - Environment variables override defaults (BCRYPT_ prefix)
    - default_cost is used when Password.create is called without a cost
    - hash_version is the prefix handed to bcrypt.gensalt ("2a" or "2b")
    """
    
    # Hashing
    default_cost: int = 12
    hash_version: str = "2b"
    
    # Logging
    log_level: str = "INFO"
    log_json: bool = True
    
    model_config = SettingsConfigDict(
        env_prefix="BCRYPT_",
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
