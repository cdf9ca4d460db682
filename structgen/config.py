"""
Type mapping configuration.

Values come from STRUCTGEN_* environment variables (a `.env` file is loaded
by the CLI) and may be overridden per run by command-line flags.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeConfig(BaseSettings):
    """How documented primitive and union types are rendered."""

    model_config = SettingsConfigDict(
        env_prefix="STRUCTGEN_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    integer_repr: str | None = Field("i64", description="Zig type for 'Integer'; unset leaves it unmapped")
    float_repr: str | None = Field("f64", description="Zig type for 'Float'; unset leaves it unmapped")
    true_as_bool: bool = Field(False, description="Map 'True' to bool instead of @TypeOf(true)")
    prefer_json_value_for_unions: bool = Field(
        True, description="Map 'X or Y' types to std.json.Value instead of leaving them unmapped"
    )
    strict: bool = Field(False, description="Unmapped types abort the run instead of emitting a placeholder")

    @field_validator("integer_repr", "float_repr", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    def with_overrides(self, **overrides: Any) -> "TypeConfig":
        """Return a copy with every non-None override applied."""
        return self.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def load_config() -> TypeConfig:
    """Build a TypeConfig from the environment, falling back to defaults."""
    return TypeConfig()
