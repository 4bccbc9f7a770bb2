"""Engine configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EngineSettings(BaseModel):
    """Immutable settings for a TemplateEngine.

    root is the directory template paths are resolved under. A trailing
    slash is dropped so that resolution always inserts exactly one.
    """

    model_config = ConfigDict(frozen=True)

    root: str
    encoding: str = "utf-8"
    strict: bool = Field(default=True, description="Raise on an unterminated '{{'")
    cache_enabled: bool = False

    @field_validator("root")
    @classmethod
    def _normalize_root(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("root must not be empty")
        # Keep "/" itself intact
        return value.rstrip("/") or "/"
