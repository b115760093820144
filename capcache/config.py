"""Configuration management for in-memory caches."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from capcache.in_memory_cache.eviction_policy.eviction_policy import EvictionPolicy


class Settings(BaseSettings):
    """Cache settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CAPCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment variables
    )

    # Cache Configuration
    eviction_policy: str = Field(default="LRU", description="Eviction policy (LRU or LFU)")
    capacity: int = Field(default=0, ge=0, description="Maximum cached bytes, 0 for unlimited")
    max_elements: int = Field(default=0, ge=0, description="Maximum cached keys, 0 for unlimited")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    # Monitoring
    enable_metrics: bool = Field(default=True, description="Enable Prometheus metrics")

    @field_validator("eviction_policy")
    @classmethod
    def _validate_eviction_policy(cls, value: str) -> str:
        return EvictionPolicy.parse(value).value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        return value.upper()


# Global settings instance
settings = Settings()
