"""FastAPI router exposing the ssh-keygen module."""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .engine import MODULE_KEY, execute, module_info
from .errors import GenerationFailure, UnsupportedKeyType

router = APIRouter(tags=["ssh-keygen"])


@router.get(f"/{MODULE_KEY}")
async def describe():
    return JSONResponse(module_info())


@router.post(f"/{MODULE_KEY}")
async def keygen(body: Optional[Dict[str, Any]] = None):
    options = {k: str(v) for k, v in (body or {}).items() if v is not None}
    # CPU-bound; keep it off the event loop
    try:
        result = await run_in_threadpool(execute, options)
    except UnsupportedKeyType as e:
        return JSONResponse({"error": str(e), "id": e.help_id}, status_code=400)
    except GenerationFailure as e:
        return JSONResponse({"error": str(e)}, status_code=422)
    return JSONResponse(result)
