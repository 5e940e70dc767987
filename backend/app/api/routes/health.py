"""
Liveness probe for the reverse proxy and load balancer.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}
