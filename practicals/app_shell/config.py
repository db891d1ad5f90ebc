import logging
import os
from pathlib import Path

from practicals.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Operational configuration is unusable; the service must not start."""


def validate_ops_rules(rules: Rules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.

    Raises ConfigError when a required env var is missing or the data
    directory cannot be created or written.
    """
    ops = rules.ops

    # 1. Data dir must exist and be writable
    if ops.data_dir_required:
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Cannot create data directory {data_dir}: {e}") from e
        if not os.access(data_dir, os.W_OK):
            raise ConfigError(f"Data directory is not writable: {data_dir}")

    # 2. Required env
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    if os.environ.get("PRACTICALS_SECRET_KEY") is None:
        logger.warning("PRACTICALS_SECRET_KEY not set; using the development signing key")

    logger.info("Configuration validated (data dir: %s)", data_dir)
