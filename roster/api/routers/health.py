# roster/api/routers/health.py
import logging

from fastapi import APIRouter

from roster.schemas.health import StatusOut

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])

@router.get("/", response_model=StatusOut)
def status_ping():
    response = StatusOut(status="Up")
    logger.info(f"Status pinged: {response.status}")
    return response

@router.get("/health", response_model=StatusOut)
def health():
    return StatusOut(status="Healthy")
