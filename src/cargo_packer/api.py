"""FastAPI endpoint for the container packer."""

from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Response
from pydantic import ValidationError

from cargo_packer.config import load_settings
from cargo_packer.containers import CONTAINER_PRESETS_CM
from cargo_packer.geometry import find_layout_violations
from cargo_packer.io.schemas import PackRequest, VerifyRequest
from cargo_packer.metrics import format_summary
from cargo_packer.packing.runner import PackingCancelled, PackingWorker

logger = logging.getLogger(__name__)

settings = load_settings()

_worker: PackingWorker | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _worker
    logging.basicConfig(level=settings.log_level)
    yield
    if _worker is not None:
        _worker.shutdown(wait=False)
        _worker = None


# FastAPI app instance (exactly one)
app = FastAPI(
    title="Cargo Packer API",
    description="Greedy first-fit container packing service",
    lifespan=lifespan,
)


def get_worker() -> PackingWorker:
    global _worker
    if _worker is None:
        _worker = PackingWorker(max_workers=settings.max_workers)
    return _worker


def _error_details(e: ValidationError) -> list[str]:
    return [f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}" for err in e.errors()]


def _invalid_input(details: list[str]) -> Response:
    return Response(
        content=json.dumps({"error": "INVALID_INPUT", "details": details}),
        status_code=422,
        media_type="application/json",
    )


@app.post("/pack")
async def pack(request: dict[str, Any]) -> Any:
    """
    Pack boxes into one container.

    Input (request body):
        {
            "container": {"length": 1200, "width": 235, "height": 269},
            "boxes": [
                {"length": 60, "width": 40, "height": 30, "count": 5}
            ]
        }
    "container_preset": "40HC" may replace "container"; with neither the
    configured default preset is used.

    Returns:
        The packing result plus a one-line summary
    """
    try:
        pack_request = PackRequest.model_validate(request)
    except ValidationError as e:
        return _invalid_input(_error_details(e))

    try:
        container = pack_request.resolve_container(settings.default_preset)
        job = get_worker().submit(container, pack_request.boxes)
        try:
            result = await asyncio.wait_for(asyncio.wrap_future(job.future), timeout=settings.pack_timeout)
        except asyncio.TimeoutError:
            job.cancel()
            logger.warning(f"pack cancelled after {settings.pack_timeout}s")
            raise HTTPException(status_code=504, detail="Packing took too long and was cancelled")
        except PackingCancelled:
            raise HTTPException(status_code=504, detail="Packing was cancelled")

        logger.info(f"placed={result.placed_count}, unplaced={result.unplaced_count}, utilization={result.utilization:.4f}")

        response = result.model_dump()
        response["placed_count"] = result.placed_count
        response["unplaced_count"] = result.unplaced_count
        response["summary"] = format_summary(result)
        return response

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/verify")
async def verify(request: dict[str, Any]) -> Any:
    """
    Check a stored layout: {"container" | "container_preset", "placements": [...]}.
    """
    try:
        verify_request = VerifyRequest.model_validate(request)
    except ValidationError as e:
        return _invalid_input(_error_details(e))

    try:
        container = verify_request.resolve_container()
        problems = find_layout_violations(container, verify_request.placements)
        return {
            "ok": not problems,
            "problems": problems,
            "count": len(verify_request.placements),
        }
    except Exception as e:
        logger.error(f"ERROR in /verify endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/containers")
async def containers() -> dict[str, Any]:
    """Available container presets (cm)."""
    return {"presets": CONTAINER_PRESETS_CM, "default": settings.default_preset}


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
