from enum import Enum
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .charclass import CharacterClassError, compile_character_class

DEFAULT_CHARACTER_REGEX = "a-zA-Z0-9_öäüÖÄÜß"

LogLevel = Literal["critical", "error", "warning", "info", "debug"]


class InsertionKey(str, Enum):
    """Keys that can accept the highlighted suggestion."""

    ENTER = "enter"
    TAB = "tab"


class Settings(BaseSettings):
    """Autocomplete settings, loaded from the environment (POPCOMPLETE_*)."""

    insertion_key: InsertionKey = InsertionKey.ENTER
    character_regex: str = DEFAULT_CHARACTER_REGEX
    max_look_back_distance: int = Field(default=50, ge=1)
    snippets_supported: bool = True

    # Word list source
    min_word_trigger_length: int = Field(default=2, ge=1)
    word_list: list[str] = Field(default_factory=list)

    # Logging
    log_level: LogLevel = "info"

    model_config = SettingsConfigDict(
        env_prefix="POPCOMPLETE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("character_regex")
    @classmethod
    def _check_character_regex(cls, v: str) -> str:
        try:
            compile_character_class(v)
        except CharacterClassError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.lower()
            if v == "warn":
                return "warning"
        return v
