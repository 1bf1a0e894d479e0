"""Configuration helpers for the wardrobe suggestion service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_DB_PATH = "data/wardrobe.db"
DEFAULT_MAX_SUGGESTIONS = 6


@dataclass
class WardrobeConfig:
    """Configuration values for the wardrobe service.

    Values come from environment variables first and fall back to an optional
    environment YAML file, so deployments can override a single key without
    shipping a whole file.
    """

    wardrobe_db_path: str = DEFAULT_DB_PATH
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "WardrobeConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. ``APP_CONFIG_PATH`` points at an explicit file instead.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("WARDROBE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        db_path = get_value("wardrobe_db_path", DEFAULT_DB_PATH)
        max_suggestions = get_value("max_suggestions")
        random_seed = get_value("random_seed")
        log_level = get_value("log_level", "INFO")

        cap = cls._parse_int(max_suggestions, DEFAULT_MAX_SUGGESTIONS)
        if not 0 <= cap <= DEFAULT_MAX_SUGGESTIONS:
            raise ValueError(
                f"max_suggestions must be between 0 and {DEFAULT_MAX_SUGGESTIONS}, got {cap}"
            )

        return cls(
            wardrobe_db_path=str(db_path or DEFAULT_DB_PATH),
            max_suggestions=cap,
            random_seed=cls._parse_int(random_seed, None),
            log_level=str(log_level or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _parse_int(raw: Optional[str], default: Optional[int]) -> Optional[int]:
        if raw is None or str(raw).strip() == "":
            return default
        try:
            return int(str(raw).strip())
        except ValueError as exc:
            raise ValueError(f"Expected an integer config value, got '{raw}'") from exc

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
