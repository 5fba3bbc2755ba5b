"""Internationalization feature settings."""

import json
from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode, SettingsConfigDict

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_LANGUAGE: Active language identifier (e.g. "en", "ru")
        I18N_FALLBACK_LANGUAGES: Ordered fallback languages, comma separated
            or a JSON list (default: "en")
        I18N_KEY_PREFIX: Prefix prepended to every looked up key with a "."
        I18N_MAX_DEFAULT_DEPTH: Maximum number of nested ".default" hops
            followed when a key resolves to a branch (default: 8)
        I18N_TRANSLATIONS_DIR: Directory holding <domain>.<lang>.yml files
        I18N_LOAD_ENTRYPOINTS: Load modifier plugins from installed
            packages' entry points (default: False)

    Example:
        ```python
        from infrastructure.configuration import settings

        language = settings.i18n.language
        fallbacks = settings.i18n.fallback_languages
        ```
    """

    language: Optional[str] = Field(default=None, alias="I18N_LANGUAGE")
    fallback_languages: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en"],
        alias="I18N_FALLBACK_LANGUAGES",
        description="Languages tried, in order, after the active language",
    )
    key_prefix: Optional[str] = Field(default=None, alias="I18N_KEY_PREFIX")
    max_default_depth: int = Field(
        default=8,
        ge=1,
        alias="I18N_MAX_DEFAULT_DEPTH",
        description="Bound on '.default' recursion for branch leaves",
    )
    translations_dir: Optional[Path] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    load_entrypoints: bool = Field(default=False, alias="I18N_LOAD_ENTRYPOINTS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, v: Any) -> Any:
        """Normalize I18N_LANGUAGE, treating an empty value as unset."""
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @field_validator("fallback_languages", mode="before")
    @classmethod
    def _parse_fallback_languages(cls, v: Any) -> Any:
        """Parse I18N_FALLBACK_LANGUAGES from a JSON list or comma separated string."""
        if v is None:
            return ["en"]
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except json.JSONDecodeError as e:
                    raise ValueError(
                        f"I18N_FALLBACK_LANGUAGES is not valid JSON: {e}"
                    ) from e
            return [part.strip().lower() for part in s.split(",") if part.strip()]
        return v
