"""Configuration schema for Linguae using nested Pydantic models."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..locale import Locale


def _normalize_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return v.rstrip("/")


class SourceBaseConfig(BaseModel):
    """Settings shared by every source."""

    timeout: Annotated[float, Field(gt=0, le=300)] = Field(
        default=30.0,
        description="HTTP timeout in seconds for remote sources",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
    )


class JsonSourceConfig(SourceBaseConfig):
    """JSON files in a local directory or below a base URL."""

    type: Literal["json"]
    location: str = Field(
        ...,
        description="Directory holding <locale>.json files, or a base URL",
        min_length=1,
    )

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str) -> str:
        """Strip the trailing slash of remote locations."""
        if v.startswith(("http://", "https://")):
            return v.rstrip("/")
        return str(Path(v).expanduser())


class TransifexSourceConfig(SourceBaseConfig):
    """Transifex settings."""

    type: Literal["transifex"]
    api_token: str = Field(..., min_length=1)
    resource: str = Field(
        ...,
        description="Resource id, e.g. o:acme:p:app:r:messages",
        min_length=1,
    )
    project: str | None = Field(
        default=None,
        description="Project id used to list languages",
    )


class LokaliseSourceConfig(SourceBaseConfig):
    """Lokalise settings."""

    type: Literal["lokalise"]
    api_token: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    platform: Literal["ios", "android", "web", "other"] = "web"


class POEditorSourceConfig(SourceBaseConfig):
    """POEditor settings."""

    type: Literal["poeditor"]
    api_token: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)


class ZanataSourceConfig(SourceBaseConfig):
    """Zanata settings."""

    type: Literal["zanata"]
    base_url: str
    username: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    version: str = "master"
    document: str = "messages"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _normalize_url(v)


class WeblateSourceConfig(SourceBaseConfig):
    """Weblate settings."""

    type: Literal["weblate"]
    api_url: str = Field(
        ...,
        description="Weblate API URL (e.g., https://hosted.weblate.org/api)",
    )
    api_token: str = Field(..., min_length=1)
    project: str = Field(..., min_length=1)
    component: str = Field(..., min_length=1)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        return _normalize_url(v)


class TolgeeSourceConfig(SourceBaseConfig):
    """Tolgee settings."""

    type: Literal["tolgee"]
    api_key: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)
    base_url: str = "https://app.tolgee.io"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _normalize_url(v)


class GlotPressSourceConfig(SourceBaseConfig):
    """GlotPress settings."""

    type: Literal["glotpress"]
    base_url: str
    project: str = Field(..., min_length=1)
    translation_set: str = "default"

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        return _normalize_url(v)


SourceConfig = Annotated[
    JsonSourceConfig
    | TransifexSourceConfig
    | LokaliseSourceConfig
    | POEditorSourceConfig
    | ZanataSourceConfig
    | WeblateSourceConfig
    | TolgeeSourceConfig
    | GlotPressSourceConfig,
    Field(discriminator="type"),
]


class PlaceholderConfig(BaseModel):
    """Placeholder delimiters used by label mappings."""

    prefix: str = Field(default="${", min_length=1)
    suffix: str = Field(default="}")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


class LinguaeConfig(BaseModel):
    """
    Configuration model for a Linguae provider.

    Example YAML:
        locale: de-DE
        strict: false
        placeholder:
          prefix: "{{"
          suffix: "}}"
        source:
          type: weblate
          api_url: https://hosted.weblate.org/api
          api_token: wlu_xxx
          project: app
          component: messages
    """

    locale: str = Field(
        default="en-US",
        description="Default locale tag",
    )
    strict: bool = Field(
        default=False,
        description="Raise when a locale fails to load instead of only logging",
    )
    placeholder: PlaceholderConfig = Field(default_factory=PlaceholderConfig)
    source: SourceConfig

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Validate and normalize the locale tag."""
        return Locale.parse(v).tag
