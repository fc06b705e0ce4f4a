"""
hashkit Configuration
=====================
Hashing parameters and logging settings read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidParameters
from .password.models import DEFAULT_PARAMETERS, ParameterSet

ENV_PREFIX = "HASHKIT_"


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise InvalidParameters(
            f"{ENV_PREFIX}{name} must be an integer, got {raw!r}"
        ) from e


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class HashConfig:
    """Configuration for the default password hasher."""
    memory_kib: int = DEFAULT_PARAMETERS.memory_kib
    iterations: int = DEFAULT_PARAMETERS.iterations
    parallelism: int = DEFAULT_PARAMETERS.parallelism
    salt_length: int = DEFAULT_PARAMETERS.salt_length
    key_length: int = DEFAULT_PARAMETERS.key_length
    log_level: str = "INFO"
    log_json: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "HashConfig":
        """
        Build a config from ``HASHKIT_*`` environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (for tests)

        Returns:
            HashConfig with unset variables left at their defaults
        """
        if env is None:
            env = os.environ
        return cls(
            memory_kib=_env_int(env, "MEMORY_KIB", DEFAULT_PARAMETERS.memory_kib),
            iterations=_env_int(env, "ITERATIONS", DEFAULT_PARAMETERS.iterations),
            parallelism=_env_int(env, "PARALLELISM", DEFAULT_PARAMETERS.parallelism),
            salt_length=_env_int(env, "SALT_LENGTH", DEFAULT_PARAMETERS.salt_length),
            key_length=_env_int(env, "KEY_LENGTH", DEFAULT_PARAMETERS.key_length),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "INFO"),
            log_json=_env_bool(env, "LOG_JSON", True),
        )

    def to_parameters(self) -> ParameterSet:
        """Validated ParameterSet for new hashes."""
        return ParameterSet(
            memory_kib=self.memory_kib,
            iterations=self.iterations,
            parallelism=self.parallelism,
            salt_length=self.salt_length,
            key_length=self.key_length,
        )
