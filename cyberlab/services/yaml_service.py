"""YAML deployment descriptor ingestion.

Two independent checks exist:

* ``YamlService.ingest`` is the coarse pipeline: text -> document ->
  mapping with ``protocol``, ``architecture`` and ``scenario`` objects.
* ``check_sections`` is the finer per-section field check.

Neither persists anything.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from cyberlab.core.exceptions import PayloadValidationError, YamlIngestError
from cyberlab.core.validation import validate_payload
from cyberlab.schemas.yaml_config import YamlDeployment

YAML_SUFFIX = ".yaml"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _has_strings(section: Any, *fields: str) -> bool:
    if not isinstance(section, dict):
        return False
    return all(isinstance(section.get(field), str) for field in fields)


def validate_protocol_section(section: Any) -> bool:
    """Protocol needs string name, version, category and complexity."""
    return _has_strings(section, "name", "version", "category", "complexity")


def validate_architecture_section(section: Any) -> bool:
    """Architecture needs string name, topology, difficulty and a numeric nodesCount."""
    return _has_strings(section, "name", "topology", "difficulty") and _is_number(
        section.get("nodesCount")
    )


def validate_scenario_section(section: Any) -> bool:
    """Scenario needs string name, testType and complexity."""
    return _has_strings(section, "name", "testType", "complexity")


def check_sections(document: dict[str, Any]) -> dict[str, bool]:
    """Run the per-section field checks on an ingested document."""
    return {
        "protocol": validate_protocol_section(document.get("protocol")),
        "architecture": validate_architecture_section(document.get("architecture")),
        "scenario": validate_scenario_section(document.get("scenario")),
    }


class YamlService:
    """YAML descriptor parsing, validation and the on-disk descriptor library."""

    def __init__(self, data_dir: str | Path | None = None):
        self.data_dir = Path(data_dir) if data_dir else None

    def ingest(self, text: Any) -> dict[str, Any]:
        """Parse and validate a YAML deployment descriptor.

        Returns the parsed document unchanged. Raises YamlIngestError with
        one of the empty/parsing/shape/validation messages.
        """
        if not isinstance(text, str) or not text.strip():
            raise YamlIngestError("YAML input is empty.")

        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise YamlIngestError(f"YAML parsing error: {e}") from e

        if not isinstance(document, dict):
            raise YamlIngestError("YAML does not contain a valid object.")

        try:
            validate_payload(YamlDeployment, document)
        except PayloadValidationError as e:
            raise YamlIngestError(f"YAML validation failed: {e.message}") from e

        return document

    def list_files(self) -> list[str]:
        """Names of the YAML descriptors in the data directory."""
        if not self.data_dir:
            return []
        try:
            return sorted(
                p.name
                for p in self.data_dir.iterdir()
                if p.is_file() and p.suffix == YAML_SUFFIX
            )
        except OSError as e:
            logger.error(f"Error listing YAML files in {self.data_dir}: {e}")
            return []

    def read_file(self, filename: str) -> Any | None:
        """Load one descriptor from the data directory, or None if unreadable."""
        if not self.data_dir:
            return None
        # Plain file names only, no paths
        if Path(filename).name != filename or not filename.endswith(YAML_SUFFIX):
            return None

        path = self.data_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error reading YAML file {filename}: {e}")
            return None
