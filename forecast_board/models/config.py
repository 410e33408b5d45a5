"""Configuration models using Pydantic for validation."""

from pathlib import Path
from types import MappingProxyType
from typing import Literal, Mapping
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://www.jma.go.jp/bosai/jmatile/data/wdist/VPFD"

# Weather condition → display glyph. Unknown conditions pass through unchanged.
DEFAULT_GLYPHS: Mapping[str, str] = MappingProxyType(
    {
        "晴れ": "☀️",
        "くもり": "☁️",
        "雨": "☔",
    }
)


class FeedConfig(BaseModel):
    """Configuration for the forecast feed."""

    location_name: str = "Tokyo"
    area_code: str = "130010"
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    max_retries: int = Field(default=3, ge=0)

    @field_validator("area_code")
    @classmethod
    def validate_area_code(cls, v: str) -> str:
        """Validate that the area code is a six-digit JMA code."""
        if len(v) != 6 or not v.isdigit():
            raise ValueError(f"Area code must be six digits, got '{v}'")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        try:
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https"):
                raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
            if not parsed.netloc:
                raise ValueError("URL must have a valid host")
        except Exception as e:
            raise ValueError(f"Invalid URL '{v}': {e}")
        return v.rstrip("/")

    @property
    def url(self) -> str:
        """Full URL of the area's forecast JSON."""
        return f"{self.base_url}/{self.area_code}.json"


class DisplayConfig(BaseModel):
    """How forecast values are rendered."""

    glyphs: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_GLYPHS))
    placeholder: str = Field(default="---", min_length=1, max_length=5)

    @property
    def glyph_table(self) -> Mapping[str, str]:
        """Read-only view of the glyph mapping."""
        return MappingProxyType(self.glyphs)


class Settings(BaseModel):
    """General application settings."""

    refresh_interval_minutes: int = Field(default=60, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    """Main configuration model."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
