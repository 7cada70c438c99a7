"""Pydantic request/response models for the HTTP API.

WHY: Editor plugins and build tools talk to the transcoder over HTTP.
Pydantic models validate request bodies, serialize responses and produce
the JSON Schema shown in the /docs UI.

HOW: One model per request/response shape. Enums cover closed sets
(conversion direction, optimizer key). Every field carries a description.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- OptimizerKey values match keys in better_svg.optimizers.OPTIMIZERS
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Direction(str, Enum):
    """Conversion direction for POST /convert."""

    to_svg = "to_svg"
    to_jsx = "to_jsx"


class OptimizerKey(str, Enum):
    """Registered optimizer identifiers.

    RULES:
    - Values match keys in better_svg.optimizers.OPTIMIZERS exactly
    """

    svgo = "svgo"
    passthrough = "passthrough"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class MarkupRequest(BaseModel):
    """A piece of markup to inspect or prepare."""

    content: str = Field(description="SVG or JSX SVG markup.")


class ConvertRequest(BaseModel):
    """Markup plus the direction to convert it in."""

    content: str = Field(description="Markup to convert.")
    direction: Direction = Field(
        description="'to_svg' for JSX → SVG, 'to_jsx' for SVG → JSX.",
    )


class FinalizeRequest(BaseModel):
    """Optimizer output plus the flag returned by POST /prepare."""

    content: str = Field(description="Markup returned by the external optimizer.")
    was_jsx: bool = Field(
        description="The 'was_jsx' value returned by POST /prepare for this markup.",
    )


class OptimizeRequest(BaseModel):
    """Markup to optimize end to end."""

    content: str = Field(description="SVG, JSX SVG, or a source file holding inline SVG.")
    optimizer: OptimizerKey = Field(
        default=OptimizerKey.svgo,
        description="Optimizer backend to run between prepare and finalize.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class DetectResponse(BaseModel):
    """Result of dialect detection."""

    is_jsx: bool = Field(description="True if the markup uses JSX-only syntax.")


class ContentResponse(BaseModel):
    """Converted or finalized markup."""

    content: str = Field(description="Resulting markup.")


class PrepareResponse(BaseModel):
    """Plain SVG ready for an external optimizer."""

    prepared_svg: str = Field(description="Plain SVG to hand to the optimizer.")
    was_jsx: bool = Field(
        description="Pass this back to POST /finalize with the optimizer output.",
    )


class OptimizeResponse(BaseModel):
    """Optimized markup with size statistics."""

    content: str = Field(description="Optimized markup, same dialect as the input.")
    blocks: int = Field(description="Number of inline <svg> elements optimized.")
    bytes_before: int = Field(description="UTF-8 size of the SVG markup before.")
    bytes_after: int = Field(description="UTF-8 size of the SVG markup after.")


class OptimizerInfo(BaseModel):
    """Description of one registered optimizer."""

    key: str = Field(description="Identifier used in requests, e.g. 'svgo'.")
    name: str = Field(description="Human-readable name, e.g. 'SVGO'.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Always 'ok' when the service is running.")
    version: str = Field(description="Package version.")


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    detail: str = Field(description="Human-readable error description.")
