"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    closest_pair_env: str = "development"
    closest_pair_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Engine defaults
    default_pack_bits: int = 32

    # Request limits
    max_request_points: int = 200_000
    max_benchmark_points: int = 100_000
    # O(n^2) algorithms get their own, much lower cap
    max_quadratic_points: int = 20_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
