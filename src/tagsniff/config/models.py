"""Configuration models describing tagsniff settings."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tagsniff.tags import ENCODING_TAGS, MODE_TAGS, TYPE_TAGS


class TagsniffBaseModel(BaseModel):
    """Shared configuration for tagsniff Pydantic models."""

    model_config = ConfigDict(extra="forbid")


def _check_tag_lists(table: Dict[str, List[str]]) -> Dict[str, List[str]]:
    for key, tags in table.items():
        if not key:
            raise ValueError("table keys must be non-empty")
        present = set(tags)
        if len(present & ENCODING_TAGS) > 1:
            raise ValueError(f"{key!r} cannot be tagged both text and binary")
        reserved = present & (TYPE_TAGS | MODE_TAGS)
        if reserved:
            raise ValueError(f"{key!r} uses filesystem tags {sorted(reserved)}")
    return table


class DetectionSettings(TagsniffBaseModel):
    """Options controlling the tag resolution pipeline.

    Attributes:
        skip_content_analysis: Never read file content while resolving paths.
        skip_shebang_analysis: Never interpret shebang lines.
        custom_extensions: Extra extension -> tags entries checked before built-ins.
        custom_filenames: Extra exact filename -> tags entries checked before built-ins.
    """

    skip_content_analysis: bool = False
    skip_shebang_analysis: bool = False
    custom_extensions: Dict[str, List[str]] = Field(default_factory=dict)
    custom_filenames: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("custom_extensions", "custom_filenames")
    @classmethod
    def _validate_tables(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        return _check_tag_lists(value)


class LoggingSettings(TagsniffBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"unknown logging level {value!r}")
        return normalized


class TagsniffConfig(TagsniffBaseModel):
    """Top-level configuration struct for tagsniff.

    Attributes:
        detection: Tag resolution settings.
        logging: Logging configuration.
    """

    detection: DetectionSettings = Field(default_factory=DetectionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "TagsniffBaseModel",
    "DetectionSettings",
    "LoggingSettings",
    "TagsniffConfig",
]
