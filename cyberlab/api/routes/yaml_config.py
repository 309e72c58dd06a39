"""YAML deployment descriptor endpoints."""

import json
from typing import Any

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from cyberlab.core.deps import AppSettings
from cyberlab.core.exceptions import YamlIngestError
from cyberlab.schemas.yaml_config import (
    YamlParsed,
    YamlSectionReport,
    YamlValidationResult,
)
from cyberlab.services.yaml_service import YamlService, check_sections

router = APIRouter()


async def read_yaml_body(request: Request) -> Any:
    """Raw YAML text of a request.

    The body is taken as text for application/yaml, text/plain and similar
    content types. A JSON body is decoded and only counts if it is a string.
    """
    body = await request.body()
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            return json.loads(body) if body else None
        except ValueError:
            return None

    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise YamlIngestError(f"YAML parsing error: {e}") from e


async def _ingest(request: Request) -> dict[str, Any]:
    try:
        return YamlService().ingest(await read_yaml_body(request))
    except YamlIngestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except Exception as e:
        logger.exception(f"YAML ingestion failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected server error.",
        ) from e


@router.post("", response_model=YamlParsed)
async def ingest_yaml(request: Request) -> YamlParsed:
    """
    Parse and validate a YAML deployment descriptor (dry run).

    The body is the raw YAML document with top-level `protocol`,
    `architecture` and `scenario` mappings. Nothing is persisted.
    """
    return YamlParsed(parsed=await _ingest(request))


@router.post("/validate", response_model=YamlValidationResult)
async def validate_yaml(request: Request) -> YamlValidationResult:
    """Ingest a descriptor, then check the required fields of every section."""
    sections = check_sections(await _ingest(request))
    return YamlValidationResult(
        valid=all(sections.values()),
        sections=YamlSectionReport(**sections),
    )


@router.get("/files", response_model=list[str])
async def list_yaml_files(settings: AppSettings) -> list[str]:
    """List the YAML descriptors available on the server."""
    return YamlService(settings.yaml_data_dir).list_files()


@router.get("/files/{filename}")
async def get_yaml_file(filename: str, settings: AppSettings) -> Any:
    """Get one server-side YAML descriptor, parsed."""
    document = YamlService(settings.yaml_data_dir).read_file(filename)

    if document is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="YAML file not found",
        )

    return document
