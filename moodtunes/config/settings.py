"""
Configuration management for Moodtunes.

Provides centralized configuration loading, validation, and environment variable overrides.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from pathlib import Path

from dotenv import load_dotenv

from ..moods.profiles import SEED_TRACKS


DEFAULT_CONFIG_PATH = str(Path(__file__).parent / "default_config.yaml")


@dataclass
class SpotifyConfig:
    """Credentials and endpoints of the Spotify Web API."""
    client_id: str = ""
    client_secret: str = ""
    token_url: str = "https://accounts.spotify.com/api/token"
    api_base_url: str = "https://api.spotify.com/v1"

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)


@dataclass
class ServerConfig:
    """Configuration for the HTTP listener."""
    host: str = "0.0.0.0"
    port: int = 5000


@dataclass
class RecommendationConfig:
    """Configuration for mood resolution and the upstream query."""
    limit: int = 10
    jitter: float = 0.1
    seed_tracks: List[str] = field(default_factory=lambda: list(SEED_TRACKS))


@dataclass
class LoggingConfig:
    """Configuration for logging parameters."""
    level: str = "INFO"
    format: str = "json"


@dataclass
class ClientConfig:
    """Configuration for the console client."""
    api_url: str = "http://localhost:5000"


@dataclass
class AppConfig:
    """Main application configuration containing all sub-configurations."""
    spotify: SpotifyConfig = field(default_factory=SpotifyConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    recommendation: RecommendationConfig = field(default_factory=RecommendationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    client: ClientConfig = field(default_factory=ClientConfig)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


# env var -> (section, key, type)
ENV_OVERRIDES = {
    'SPOTIFY_CLIENT_ID': ('spotify', 'client_id', str),
    'SPOTIFY_CLIENT_SECRET': ('spotify', 'client_secret', str),
    'PORT': ('server', 'port', int),
    'MOODTUNES_HOST': ('server', 'host', str),
    'MOODTUNES_LOG_LEVEL': ('logging', 'level', str),
    'MOODTUNES_LOG_FORMAT': ('logging', 'format', str),
    'MOODTUNES_API_URL': ('client', 'api_url', str),
}


class ConfigManager:
    """Manages application configuration loading, validation, and environment overrides."""

    def __init__(self, load_env_file: bool = True):
        self._load_env_file = load_env_file

    def load(self, config_path: Optional[str] = None) -> AppConfig:
        """
        Load configuration from YAML file with environment variable overrides.

        Args:
            config_path: Path to the YAML configuration file. Defaults to the
                packaged default_config.yaml.

        Returns:
            AppConfig: Loaded and validated configuration

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_file = Path(config_path or DEFAULT_CONFIG_PATH)

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if self._load_env_file:
            load_dotenv()

        config_data = self._apply_env_overrides(config_data)
        config = self._create_config_from_dict(config_data)
        self.validate(config)
        return config

    def _create_config_from_dict(self, config_data: Dict[str, Any]) -> AppConfig:
        """Create AppConfig from dictionary data."""
        spotify_data = config_data.get('spotify') or {}
        server_data = config_data.get('server') or {}
        recommendation_data = config_data.get('recommendation') or {}
        logging_data = config_data.get('logging') or {}
        client_data = config_data.get('client') or {}

        defaults = AppConfig()

        spotify_config = SpotifyConfig(
            client_id=spotify_data.get('client_id') or defaults.spotify.client_id,
            client_secret=spotify_data.get('client_secret') or defaults.spotify.client_secret,
            token_url=spotify_data.get('token_url') or defaults.spotify.token_url,
            api_base_url=(spotify_data.get('api_base_url') or defaults.spotify.api_base_url).rstrip('/')
        )

        server_config = ServerConfig(
            host=server_data.get('host', defaults.server.host),
            port=int(server_data.get('port', defaults.server.port))
        )

        recommendation_config = RecommendationConfig(
            limit=int(recommendation_data.get('limit', defaults.recommendation.limit)),
            jitter=float(recommendation_data.get('jitter', defaults.recommendation.jitter)),
            seed_tracks=list(recommendation_data.get('seed_tracks', defaults.recommendation.seed_tracks))
        )

        logging_config = LoggingConfig(
            level=str(logging_data.get('level', defaults.logging.level)).upper(),
            format=logging_data.get('format', defaults.logging.format)
        )

        client_config = ClientConfig(
            api_url=(client_data.get('api_url') or defaults.client.api_url).rstrip('/')
        )

        return AppConfig(
            spotify=spotify_config,
            server=server_config,
            recommendation=recommendation_config,
            logging=logging_config,
            client=client_config
        )

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration data."""
        for env_var, (section, key, cast) in ENV_OVERRIDES.items():
            env_value = os.getenv(env_var)
            if env_value is None or env_value == "":
                continue
            current = config_data.setdefault(section, {}) or {}
            config_data[section] = current
            try:
                current[key] = cast(env_value)
            except ValueError:
                raise ConfigValidationError(
                    f"Environment variable {env_var} has invalid value: {env_value!r}"
                )

        return config_data

    def validate(self, config: AppConfig) -> bool:
        """
        Validate configuration values.

        Args:
            config: Configuration to validate

        Returns:
            bool: True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        errors = []

        if not config.spotify.token_url:
            errors.append("Spotify token_url cannot be empty")

        if not config.spotify.api_base_url:
            errors.append("Spotify api_base_url cannot be empty")

        if not (0 < config.server.port < 65536):
            errors.append("Server port must be between 1 and 65535")

        if config.recommendation.limit <= 0:
            errors.append("Recommendation limit must be positive")

        if config.recommendation.jitter < 0:
            errors.append("Recommendation jitter cannot be negative")

        if not config.recommendation.seed_tracks:
            errors.append("Recommendation seed_tracks cannot be empty")

        valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if config.logging.level not in valid_log_levels:
            errors.append(f"Logging level must be one of: {valid_log_levels}")

        if config.logging.format not in ['json', 'text']:
            errors.append("Logging format must be 'json' or 'text'")

        if not config.client.api_url:
            errors.append("Client api_url cannot be empty")

        if errors:
            raise ConfigValidationError(f"Configuration validation failed: {'; '.join(errors)}")

        return True
