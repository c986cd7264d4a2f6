"""Settings for the agent call boundary.

Only applications read these; the schema compiler and decoder take no
configuration.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr

DEFAULT_MODEL = "gpt-4o"


class AgentSettings(BaseModel):
    """Model name, credential and retry budget for a ``StructuredClient``."""
    model_config = ConfigDict(frozen=True)

    model: str = DEFAULT_MODEL
    api_key: SecretStr | None = None
    api_base: str | None = None
    max_attempts: int = Field(default=1, ge=1)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AgentSettings:
        """Build settings from environment variables.

        Reads ``TOOLCAST_MODEL``, ``OPENAI_API_KEY``, ``TOOLCAST_API_BASE``
        and ``TOOLCAST_MAX_ATTEMPTS``. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        keys = {
            "model": "TOOLCAST_MODEL",
            "api_key": "OPENAI_API_KEY",
            "api_base": "TOOLCAST_API_BASE",
            "max_attempts": "TOOLCAST_MAX_ATTEMPTS",
        }
        return cls(**{field: env[key] for field, key in keys.items() if env.get(key)})
