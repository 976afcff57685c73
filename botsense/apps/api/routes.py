"""Detection API Routes"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from botsense.detection import Snapshot, detection_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["detection"])


class DiagnosticItem(BaseModel):
    """Diagnostic model"""

    level: str
    message: str
    detector: str | None
    error_type: str | None


class DetectionResponse(BaseModel):
    """Detection response model"""

    verdict: bool
    label: str
    results: dict[str, bool]
    fired: list[str]
    diagnostics: list[DiagnosticItem]
    timestamp: str


class DetectorList(BaseModel):
    """Registered detectors model"""

    detectors: list[str]
    count: int


@router.post("/detect", response_model=DetectionResponse)
def detect(snapshot: Snapshot):
    """Evaluate a client environment snapshot"""
    report = detection_service.check(snapshot)
    return report.to_dict()


@router.get("/detectors", response_model=DetectorList)
def list_detectors():
    """List registered detectors in evaluation order"""
    names = detection_service.registry.names()
    return {"detectors": names, "count": len(names)}
