"""
Configuration for alpsvault.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Persistent store configuration."""

    backend: str = "sqlite"
    db_path: str = "data/alpsvault.db"


class EnrichmentConfig(BaseModel):
    """Network enrichment collaborators (article extraction, video, readme)."""

    extraction_endpoint: str = "http://localhost:3000/api/extract"
    timeout: float = 15.0
    user_agent: str = "alpsvault/0.1"
    readme_branches: list[str] = Field(default_factory=lambda: ["main", "master"])
    # Placeholder video thumbnails are about 1KB
    thumbnail_min_bytes: int = 1000
    medium_proxy_host: str | None = "freedium.cfd"
    offline_retry_delay: float = 1.0


class QueryConfig(BaseModel):
    """Query and date-expression settings."""

    # 0 = Monday ... 6 = Sunday
    week_start: int = Field(default=0, ge=0, le=6)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            ALPS_STORE_BACKEND: Store backend (sqlite)
            ALPS_DB_PATH: SQLite database path (":memory:" for ephemeral)
            ALPS_EXTRACTION_ENDPOINT: Article extraction service URL
            ALPS_HTTP_TIMEOUT: Timeout for every enrichment request (seconds)
            ALPS_USER_AGENT: User-Agent header for enrichment requests
            ALPS_README_BRANCHES: Comma-separated readme branch candidates
            ALPS_THUMBNAIL_MIN_BYTES: Minimum accepted video thumbnail size
            ALPS_MEDIUM_PROXY_HOST: Proxy host for medium.com articles ("" disables)
            ALPS_OFFLINE_RETRY_DELAY: Delay before the offline queue runs after load
            ALPS_WEEK_START: First day of week, 0 = Monday
            ALPS_LOG_LEVEL: Log level
        """
        # Load .env file if provided or exists
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            # If value is empty string, return default
            if value == "":
                return default
            # Convert boolean strings
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            # Convert numeric strings
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            if isinstance(default, list):
                return [item.strip() for item in value.split(",") if item.strip()]
            return value

        enrichment_defaults = EnrichmentConfig()
        proxy_host = os.getenv("ALPS_MEDIUM_PROXY_HOST")

        return cls(
            storage=StorageConfig(
                backend=get_env("ALPS_STORE_BACKEND", "sqlite"),
                db_path=get_env("ALPS_DB_PATH", "data/alpsvault.db"),
            ),
            enrichment=EnrichmentConfig(
                extraction_endpoint=get_env(
                    "ALPS_EXTRACTION_ENDPOINT", enrichment_defaults.extraction_endpoint
                ),
                timeout=get_env("ALPS_HTTP_TIMEOUT", enrichment_defaults.timeout),
                user_agent=get_env("ALPS_USER_AGENT", enrichment_defaults.user_agent),
                readme_branches=get_env(
                    "ALPS_README_BRANCHES", enrichment_defaults.readme_branches
                ),
                thumbnail_min_bytes=get_env(
                    "ALPS_THUMBNAIL_MIN_BYTES", enrichment_defaults.thumbnail_min_bytes
                ),
                # An explicitly empty value turns the proxy off
                medium_proxy_host=(
                    enrichment_defaults.medium_proxy_host
                    if proxy_host is None
                    else proxy_host or None
                ),
                offline_retry_delay=get_env(
                    "ALPS_OFFLINE_RETRY_DELAY", enrichment_defaults.offline_retry_delay
                ),
            ),
            query=QueryConfig(
                week_start=get_env("ALPS_WEEK_START", 0),
            ),
            logging=LoggingConfig(
                level=get_env("ALPS_LOG_LEVEL", "INFO"),
                log_to_file=get_env("ALPS_LOG_TO_FILE", True),
                log_dir=get_env("ALPS_LOG_DIR", "logs"),
                file_rotation=get_env("ALPS_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("ALPS_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("ALPS_LOG_COMPRESSION", "zip"),
                serialize=get_env("ALPS_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        # Env sections that differ from defaults override YAML sections
        final_dict = {**config_dict}
        default = cls()
        for section in ("storage", "enrichment", "query", "logging"):
            env_section = getattr(env_config, section)
            if env_section != getattr(default, section):
                final_dict[section] = env_section.model_dump()

        return cls(**final_dict) if final_dict else env_config

