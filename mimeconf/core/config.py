"""
Generator configuration.

A single dataclass holds the few knobs the generator has. Values come
from defaults, then MIMECONF_* environment variables, then explicit
overrides (the CLI flag), in that order.

Environment values may reference other variables with ${VAR} or
${VAR:default}.
"""

import os
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from mimeconf.core.exceptions import ConfigValidationError

DEFAULT_SOURCE = Path("/etc/mime.types")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")

# field name -> environment variable
ENV_OVERRIDES: Dict[str, str] = {
    "source": "MIMECONF_SOURCE",
    "verbose": "MIMECONF_VERBOSE",
    "log_level": "MIMECONF_LOG_LEVEL",
}


@dataclass
class GeneratorConfig:
    """mimetype.assign generator configuration."""

    source: Path = DEFAULT_SOURCE
    verbose: bool = False
    log_level: str = "WARNING"
    encoding: str = "utf-8"

    def validate(self) -> None:
        """Check field values, raising ConfigValidationError on the first bad one."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level: {self.log_level}",
                field="log_level",
                value=self.log_level,
            )
        self.log_level = self.log_level.upper()


def expand_env_vars(value: str) -> str:
    """Expand ${VAR_NAME} and ${VAR_NAME:default} references."""
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replace_env_var(match: re.Match) -> str:
        var_name = match.group(1)
        default_value = match.group(2) if match.group(2) is not None else ""
        return os.environ.get(var_name, default_value)

    return re.sub(pattern, replace_env_var, value)


def parse_bool(name: str, raw: str) -> bool:
    """Parse a boolean environment value."""
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigValidationError(
        f"Invalid boolean for {name}: {raw!r}", field=name, value=raw
    )


def apply_env_overrides(config: GeneratorConfig) -> GeneratorConfig:
    """Apply MIMECONF_* environment variables to config in place."""
    for field_name, env_name in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None:
            continue
        raw = expand_env_vars(raw)
        if field_name == "source":
            config.source = Path(raw)
        elif field_name == "verbose":
            config.verbose = parse_bool(env_name, raw)
        else:
            setattr(config, field_name, raw)
    return config


def load_config(**overrides: Any) -> GeneratorConfig:
    """
    Build the effective configuration.

    Args:
        **overrides: Field values that win over defaults and environment.
            None values are ignored.

    Returns:
        Validated GeneratorConfig.
    """
    config = apply_env_overrides(GeneratorConfig())

    known = {f.name for f in fields(GeneratorConfig)}
    for name, value in overrides.items():
        if name not in known:
            raise ConfigValidationError(f"Unknown config field: {name}", field=name)
        if value is None:
            continue
        if name == "source":
            value = Path(value)
        setattr(config, name, value)

    config.validate()
    return config
