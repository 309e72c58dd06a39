"""Schemas for declarative YAML deployment descriptors."""

from typing import Any

from pydantic import BaseModel


class YamlDeployment(BaseModel):
    """Top-level shape of a YAML deployment descriptor.

    Each section only has to be a mapping here; the per-section fields are
    checked by a separate pass.
    """

    protocol: dict[str, Any]
    architecture: dict[str, Any]
    scenario: dict[str, Any]

    model_config = {"extra": "forbid"}


class YamlParsed(BaseModel):
    """YAML ingestion response schema."""

    parsed: dict[str, Any]


class YamlSectionReport(BaseModel):
    """Per-section result of the fine-grained descriptor check."""

    protocol: bool
    architecture: bool
    scenario: bool


class YamlValidationResult(BaseModel):
    """YAML validation response schema."""

    valid: bool
    sections: YamlSectionReport
