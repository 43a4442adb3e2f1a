"""Waffle solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Waffle solvers.

    Every field may be overridden by a `WAFFLE_`-prefixed environment variable or an
    entry in a `.env` file, e.g. `WAFFLE_MAX_PATH_LENGTH=12`.
    """

    max_path_length: int = 10
    """Longest swap path explored before a branch of the swap search is abandoned. Default: 10."""

    report_interval: int = 10_000
    """Interval (in number of states checked) at which to report progress. Default: 10,000."""

    log_file: str | None = None
    """File to append solver progress to. If None (default), progress is not logged."""

    model_config = SettingsConfigDict(
        env_prefix="WAFFLE_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = SolverConfig()
