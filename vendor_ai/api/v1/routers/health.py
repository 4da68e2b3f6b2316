# vendor_ai/api/v1/routers/health.py
import time
import subprocess
from functools import lru_cache
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from vendor_ai.core.config import get_settings

router = APIRouter(tags=["health"])
START_TIME = time.time()


@lru_cache
def _git_sha(short: bool = True) -> str:
    # Resolved once per process; the checkout does not change under a running server
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Vendor Sales AI API is running!"


@router.get("/health")
def health():
    """
    Health check (plain def: FastAPI runs it in the threadpool, git lookup may block):
    - expose basic app info
    - Groq: only checks that the key is set (no network call)
    """
    settings = get_settings()
    version = settings.GIT_SHA if settings.GIT_SHA and settings.GIT_SHA != "unknown" else _git_sha()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": version,
        "uptime_seconds": int(time.time() - START_TIME),
        "model": settings.GROQ_MODEL,
        "groq_api_key_set": bool(settings.GROQ_API_KEY),
    }

    status = "ok" if checks["groq_api_key_set"] else "error"
    return {"status": status, "checks": checks, "timestamp": int(time.time())}
