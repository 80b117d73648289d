"""Liveness endpoint."""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", response_model=Dict[str, str])
def health() -> Dict[str, str]:
    """Report that the process is up, together with the server time."""
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}
