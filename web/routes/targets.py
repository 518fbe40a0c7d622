"""Target run routes."""

import datetime

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from web.config import TargetConfig
from web.deps import get_target_config
from web.services.targets import run_targets

router = APIRouter()


@router.api_route("/run", methods=["GET", "POST"], response_class=JSONResponse)
async def run(
    config: TargetConfig = Depends(get_target_config),
    date: datetime.date | None = None,
    weeks: int | None = Query(default=None, ge=0, le=52),
):
    """Compute today's targets and write the weekly projection."""
    result = await run_targets(config, today=date, weeks=weeks)
    return JSONResponse(content=result.body, status_code=result.status_code)


@router.get("/health", response_class=JSONResponse)
async def health():
    return JSONResponse(content={"status": "ok"})
