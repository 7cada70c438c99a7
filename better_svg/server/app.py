"""FastAPI application exposing the transcoder over HTTP.

WHY: Editor plugins, build steps and other non-Python tools need the JSX
round trip without embedding Python. Exposing prepare/finalize separately
lets a client run its own optimizer in between; /optimize does the whole
trip server-side.

HOW: A single FastAPI app with endpoints grouped by tags. Transcoding
endpoints are pure and async. /optimize is a plain ``def`` so FastAPI
runs the blocking SVGO subprocess in its threadpool.

RULES:
- Every endpoint has a summary and documented error responses
- Error responses use the ErrorResponse schema
- Optimizer failures → 502; optimizer misconfiguration → 500
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from better_svg import __version__
from better_svg.core.bridge import finalize_after_optimization, prepare_for_optimization
from better_svg.core.detect import is_jsx_svg
from better_svg.core.document import optimize_document
from better_svg.core.transcode import convert_jsx_to_svg, convert_svg_to_jsx
from better_svg.optimizers import OPTIMIZERS, OptimizerError, get_optimizer
from better_svg.server.models import (
    ContentResponse,
    ConvertRequest,
    DetectResponse,
    Direction,
    ErrorResponse,
    FinalizeRequest,
    HealthResponse,
    MarkupRequest,
    OptimizeRequest,
    OptimizeResponse,
    OptimizerInfo,
    PrepareResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Better SVG API",
    description=(
        "Convert JSX-flavoured SVG to plain SVG and back, and optimize it "
        "with SVGO without losing expressions, spreads or event handlers."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Transcoding
# ---------------------------------------------------------------------------


@app.post(
    "/detect",
    response_model=DetectResponse,
    tags=["transcode"],
    summary="Detect JSX SVG",
    description="Report whether the markup uses JSX-only syntax.",
)
async def detect(request: MarkupRequest) -> DetectResponse:
    return DetectResponse(is_jsx=is_jsx_svg(request.content))


@app.post(
    "/convert",
    response_model=ContentResponse,
    tags=["transcode"],
    summary="Convert between JSX SVG and plain SVG",
    description=(
        "Run the forward (to_svg) or reverse (to_jsx) transcoder "
        "unconditionally, without dialect detection."
    ),
)
async def convert(request: ConvertRequest) -> ContentResponse:
    if request.direction == Direction.to_svg:
        return ContentResponse(content=convert_jsx_to_svg(request.content))
    return ContentResponse(content=convert_svg_to_jsx(request.content))


@app.post(
    "/prepare",
    response_model=PrepareResponse,
    tags=["transcode"],
    summary="Prepare markup for an external optimizer",
    description=(
        "Detect JSX and, if found, convert to plain SVG. Keep the returned "
        "was_jsx flag and send it to /finalize with the optimizer output."
    ),
)
async def prepare(request: MarkupRequest) -> PrepareResponse:
    prepared = prepare_for_optimization(request.content)
    return PrepareResponse(prepared_svg=prepared.prepared_svg, was_jsx=prepared.was_jsx)


@app.post(
    "/finalize",
    response_model=ContentResponse,
    tags=["transcode"],
    summary="Restore JSX after external optimization",
    description="Convert optimizer output back to JSX when was_jsx is true.",
)
async def finalize(request: FinalizeRequest) -> ContentResponse:
    return ContentResponse(
        content=finalize_after_optimization(request.content, request.was_jsx),
    )


# ---------------------------------------------------------------------------
# Endpoints: Optimization
# ---------------------------------------------------------------------------


@app.post(
    "/optimize",
    response_model=OptimizeResponse,
    tags=["optimize"],
    summary="Optimize markup end to end",
    description=(
        "Optimize every inline <svg> element in the content with the chosen "
        "optimizer, preserving JSX syntax."
    ),
    responses={
        500: {"model": ErrorResponse, "description": "Optimizer is misconfigured."},
        502: {"model": ErrorResponse, "description": "Optimizer failed."},
    },
)
def optimize(request: OptimizeRequest) -> OptimizeResponse:
    try:
        optimizer = get_optimizer(request.optimizer.value)
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    try:
        result = optimize_document(request.content, optimizer)
    except OptimizerError as exc:
        logger.exception("Optimizer %s failed", request.optimizer.value)
        raise HTTPException(status_code=502, detail=str(exc))

    return OptimizeResponse(
        content=result.text,
        blocks=result.blocks,
        bytes_before=result.bytes_before,
        bytes_after=result.bytes_after,
    )


@app.get(
    "/optimizers",
    response_model=List[OptimizerInfo],
    tags=["optimize"],
    summary="List available optimizers",
)
async def list_optimizers() -> List[OptimizerInfo]:
    result = []
    for key, optimizer_cls in sorted(OPTIMIZERS.items()):
        try:
            name = optimizer_cls().name
        except ValueError:
            # SVGO command not configured; still list the key
            name = key
        result.append(OptimizerInfo(key=key, name=name))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the better-svg-api console script."""
    import uvicorn

    from better_svg import config

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
