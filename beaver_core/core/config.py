# File: beaver_core/core/config.py

import os
from functools import lru_cache
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, field_validator

from beaver_core.core.bootstrap import DEFAULT_PROFILE, resolve_active_profile


# Per-profile defaults, applied before explicit environment overrides.
# Profiles not listed here fall through to the class defaults.
PROFILE_DEFAULTS: dict[str, dict[str, Any]] = {
    "local": {
        "debug": True,
        "log_level": "DEBUG",
        "database_url": "sqlite:///./local.db",
    },
    "test": {
        "debug": True,
        "log_level": "WARNING",
        "database_url": "sqlite://",
    },
    "production": {
        "debug": False,
        "log_level": "INFO",
    },
}

# environment key -> Settings field
ENV_OVERRIDES = {
    "PROJECT_NAME": "PROJECT_NAME",
    "DEBUG": "debug",
    "LOG_LEVEL": "log_level",
    "DATABASE_URL": "database_url",
    "SECRET_KEY": "secret_key",
    "BACKEND_CORS_ORIGINS": "backend_cors_origins",
}


class Settings(BaseModel):
    PROJECT_NAME: str = "Beaver Core API"
    VERSION: str = "0.1.0"

    profile: str = DEFAULT_PROFILE
    debug: bool = False
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    # CORS
    backend_cors_origins: List[str] = []

    # Database
    database_url: str = "sqlite:///./beaver.db"

    # Security
    secret_key: str = "CHANGE_ME_IN_PRODUCTION"

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings for the active profile.

        Profile defaults are applied first; any of the keys in
        ``ENV_OVERRIDES`` present in ``environ`` win over them.
        """
        if environ is None:
            environ = os.environ

        profile = resolve_active_profile(environ)
        values: dict[str, Any] = {"profile": profile}
        values.update(PROFILE_DEFAULTS.get(profile, {}))

        for key, field in ENV_OVERRIDES.items():
            if key in environ:
                values[field] = environ[key]

        return cls(**values)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_environ()
