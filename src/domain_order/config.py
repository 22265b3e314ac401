"""
Configuration for the domain order adapter.

Configuration is held in dataclasses and can be created with defaults,
loaded from a JSON file, or read from the environment (with an optional
``.env`` file).
"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.scaleway.com"
DEFAULT_TIMEOUT_SECONDS = 300.0
DEFAULT_CONFIG_PATH = Path.home() / ".domain_order" / "config.json"


@dataclass
class RegistrarConfig:
    """Registrar API endpoint and credentials."""

    api_url: str = DEFAULT_API_URL
    secret_key: str = ""
    default_project_id: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "info"
    output_format: str = "text"  # 'json', 'text', 'both'


@dataclass
class SystemConfig:
    """Main configuration combining all sub-configurations."""

    registrar: RegistrarConfig = field(default_factory=RegistrarConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def create_default_config(
    secret_key: str = "",
    default_project_id: str = "",
) -> SystemConfig:
    """Create a configuration with default endpoint and logging settings."""
    return SystemConfig(
        registrar=RegistrarConfig(
            secret_key=secret_key,
            default_project_id=default_project_id,
        ),
        logging=LoggingConfig(),
    )


def load_config_from_file(config_path: Path) -> Optional[SystemConfig]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        SystemConfig if successful, None otherwise
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        registrar_data = data.get("registrar", {})
        registrar = RegistrarConfig(
            api_url=registrar_data.get("api_url", DEFAULT_API_URL),
            secret_key=registrar_data.get("secret_key", ""),
            default_project_id=registrar_data.get("default_project_id", ""),
            timeout_seconds=float(registrar_data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
        )

        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            level=logging_data.get("level", "info"),
            output_format=logging_data.get("output_format", "text"),
        )

        return SystemConfig(registrar=registrar, logging=logging_config)

    except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None
    except FileNotFoundError:
        return None


def save_config_to_file(config: SystemConfig, config_path: Path) -> bool:
    """
    Save configuration to a JSON file.

    The secret key is never written; supply it through the environment.

    Returns:
        True if successful, False otherwise
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "registrar": {
                "api_url": config.registrar.api_url,
                "default_project_id": config.registrar.default_project_id,
                "timeout_seconds": config.registrar.timeout_seconds,
            },
            "logging": {
                "level": config.logging.level,
                "output_format": config.logging.output_format,
            },
        }

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        return True

    except (OSError, TypeError) as e:
        print(f"Error saving config: {e}", file=sys.stderr)
        return False


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def load_config_from_env(
    env_file: Optional[Path] = None,
    base: Optional[SystemConfig] = None,
) -> SystemConfig:
    """
    Read configuration from environment variables.

    Variables found in ``env_file`` (or a ``.env`` in the working directory)
    are loaded first without overriding the real environment. Values not set
    in the environment are taken from ``base``.
    """
    load_dotenv(dotenv_path=env_file)

    base = base or create_default_config()

    return SystemConfig(
        registrar=RegistrarConfig(
            api_url=os.getenv("SCW_API_URL", base.registrar.api_url),
            secret_key=os.getenv("SCW_SECRET_KEY", base.registrar.secret_key),
            default_project_id=os.getenv(
                "SCW_DEFAULT_PROJECT_ID", base.registrar.default_project_id
            ),
            timeout_seconds=_float_env("SCW_TIMEOUT", base.registrar.timeout_seconds),
        ),
        logging=LoggingConfig(
            level=os.getenv("DOMAIN_ORDER_LOG_LEVEL", base.logging.level).lower(),
            output_format=os.getenv("DOMAIN_ORDER_LOG_FORMAT", base.logging.output_format).lower(),
        ),
    )
