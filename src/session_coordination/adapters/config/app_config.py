"""12-factor configuration adapter using environment variables."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from session_coordination.adapters.storage.settings_store import (
    InMemorySettingsStore,
    JsonFileSettingsStore,
)
from session_coordination.domain.contracts.settings_store import SettingsStoreProtocol


class SessionConfig(BaseSettings):
    """Timing and integration settings for the session coordination layer."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Connection quality
    latency_poll_interval_ms: int = Field(
        default=2000, description="Period between transport stats samples in milliseconds"
    )

    # Typing presence
    typing_ttl_ms: int = Field(
        default=3000, description="Age after which a remote typing entry is evicted"
    )
    typing_sweep_interval_ms: int = Field(
        default=1000, description="Period of the stale typing entry sweep"
    )
    typing_throttle_ms: int = Field(
        default=1000, description="Minimum time between outgoing typing broadcasts"
    )
    typing_auto_stop_ms: int = Field(
        default=3000,
        description="Inactivity after which a stop-typing broadcast is sent automatically",
    )
    typing_topic_prefix: str = Field(
        default="typing", description="Prefix of the pub/sub topic per conversation scope"
    )

    # Push-to-talk persistence
    settings_file: str | None = Field(
        default=None,
        description="JSON file for push-to-talk settings (in-memory when unset)",
    )

    # HTTP latency estimator (fallback when no transport stats are available)
    latency_probe_url: str | None = Field(
        default=None, description="URL probed with HEAD requests to estimate latency"
    )
    latency_probe_api_key: str | None = Field(
        default=None, description="Value of the 'apikey' header sent with probe requests"
    )
    latency_probe_interval_ms: int = Field(
        default=5000, description="Period between HTTP latency probes in milliseconds"
    )
    latency_probe_scale: float = Field(
        default=0.4, description="Fraction of the HTTP round trip reported as voice latency"
    )
    latency_probe_timeout_seconds: float = Field(
        default=5.0, description="Timeout for a single probe request in seconds"
    )

    @field_validator(
        "latency_poll_interval_ms",
        "typing_ttl_ms",
        "typing_sweep_interval_ms",
        "typing_throttle_ms",
        "typing_auto_stop_ms",
        "latency_probe_interval_ms",
        "latency_probe_timeout_seconds",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate intervals and timeouts are positive."""
        if v <= 0:
            raise ValueError("intervals and timeouts must be positive")
        return v

    @field_validator("latency_probe_scale")
    @classmethod
    def validate_scale(cls, v: float) -> float:
        """Validate the probe scale is a fraction in (0, 1]."""
        if not 0 < v <= 1:
            raise ValueError("latency_probe_scale must be in (0, 1]")
        return v

    def build_settings_store(self) -> SettingsStoreProtocol:
        """Create the push-to-talk settings store for this configuration."""
        if self.settings_file:
            return JsonFileSettingsStore(self.settings_file)
        return InMemorySettingsStore()
