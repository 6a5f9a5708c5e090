"""Runtime configuration for the todo app."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "TODO_APP_",
        "env_file": ".env",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }

    host: str = Field(default="0.0.0.0", description="Listen address")
    # PORT is honoured unprefixed, as container platforms set it
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "TODO_APP_PORT"),
        description="Listen port",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    seed_todos: bool = Field(default=True, description="Start with the default todos")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()
