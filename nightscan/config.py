"""Configuration management for nightscan."""
import os
from pathlib import Path
import yaml
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from config.yaml and environment variables."""

    def __init__(self, config_path=None):
        if config_path is None:
            config_path = os.getenv("NIGHTSCAN_CONFIG") or Path(__file__).parent / "config.yaml"

        with open(config_path) as f:
            self._config = yaml.safe_load(f)

        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load environment variable overrides."""
        self._cache_root = os.getenv("NIGHTSCAN_CACHE_ROOT")
        self._download_root = os.getenv("NIGHTSCAN_DOWNLOAD_ROOT")
        self._log_level = os.getenv("NIGHTSCAN_LOG_LEVEL")

    @property
    def http_timeout(self):
        return self._config["http"]["timeout"]

    @property
    def download_chunk_size(self):
        return self._config["http"]["chunk_size"]

    @property
    def workers(self):
        return self._config["pipeline"]["workers"]

    @property
    def retries(self):
        return self._config["pipeline"]["retries"]

    @property
    def retry_wait(self):
        return self._config["pipeline"]["retry_wait"]

    @property
    def retry_wait_max(self):
        return self._config["pipeline"]["retry_wait_max"]

    @property
    def cache_root(self):
        return Path(self._cache_root or self._config["cache"]["root"])

    @property
    def cache_metadata(self):
        return self._config["cache"]["cache_metadata"]

    @property
    def cache_bands(self):
        return self._config["cache"]["cache_bands"]

    @property
    def scene_list(self):
        return Path(self._config["paths"]["scene_list"])

    @property
    def result_path(self):
        return Path(self._config["paths"]["result"])

    @property
    def download_root(self):
        return Path(self._download_root or self._config["paths"]["download_root"])

    @property
    def log_level(self):
        return self._log_level or self._config["logging"]["level"]

    @property
    def log_format(self):
        return self._config["logging"]["format"]


# Global config instance
config = Config()
