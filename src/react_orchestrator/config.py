# config.py
# Runtime settings, read from the environment (and .env) once at startup.

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from react_orchestrator.llm import OPENROUTER_BASE_URL

DEFAULT_MODEL = "anthropic/claude-3.5-haiku"


class Settings(BaseSettings):
    """Model endpoint and loop limits for one process, from ORCHESTRATOR_* variables."""

    model_config = SettingsConfigDict(env_prefix="ORCHESTRATOR_", extra="ignore")

    model: str = Field(DEFAULT_MODEL, description="OpenAI-compatible model string.")
    api_key: str | None = Field(
        None,
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "api_key"),
        description="Key for the model endpoint.",
    )
    base_url: str = Field(OPENROUTER_BASE_URL, description="Chat-completions base URL.")
    temperature: float = Field(0.1, ge=0.0, le=2.0)
    max_iterations: int | None = Field(
        25, ge=1, description="Iteration ceiling per agent run. None means unbounded."
    )

    @field_validator("max_iterations", mode="before")
    @classmethod
    def zero_disables_ceiling(cls, v: Any) -> Any:
        """ORCHESTRATOR_MAX_ITERATIONS=0 disables the iteration ceiling."""
        if isinstance(v, str):
            v = v.strip()
        if v in (0, "0"):
            return None
        return v

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment. Raises ValidationError on bad values."""
        return cls()
