"""
FastAPI backend for the host diff service.

Provides REST API endpoints for:
- Uploading host snapshots (host_<ip>_<timestamp>.json)
- Listing a host's snapshot history
- Comparing two snapshots of the same host
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import HostDiffSettings, LOG_FORMAT
from hostdiff import __version__
from hostdiff.errors import (
    HostDiffError,
    DecodeError,
    NotFoundError,
    AddressMismatchError,
    ValidationError,
    ConflictError
)
from hostdiff.service import HostDiffService
from hostdiff.storage import SnapshotStore

settings = HostDiffSettings.from_env()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Host Diff - Snapshot Comparison",
    description="Upload host snapshots and compare how a host's exposed services change over time.",
    version=__version__
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global instances
snapshot_store: Optional[SnapshotStore] = None
host_service: Optional[HostDiffService] = None

ERROR_STATUS = {
    ValidationError: 400,
    DecodeError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    AddressMismatchError: 422,
}


# Pydantic models
class SnapshotInfoResponse(BaseModel):
    """A stored snapshot's identity."""
    id: str
    address: str
    timestamp: str


class HostHistoryResponse(BaseModel):
    """Snapshots stored for one address, newest first."""
    address: str
    snapshots: List[SnapshotInfoResponse]


class SoftwareModel(BaseModel):
    vendor: str = ""
    product: str = ""
    version: str = ""


class TLSModel(BaseModel):
    version: str = ""
    cipher: str = ""
    cert_fingerprint: str = ""


class ServiceModel(BaseModel):
    port: int
    protocol: str
    status: int = 0
    software: SoftwareModel
    tls: Optional[TLSModel] = None
    vulnerabilities: List[str] = []


class ServiceChangeModel(BaseModel):
    port: int
    protocol: str
    changes: Dict[str, str]


class VulnerabilityChangeModel(BaseModel):
    cve_id: str
    port: int
    protocol: str


class DiffReportResponse(BaseModel):
    """Differences between two snapshots."""
    summary: str
    added_services: List[ServiceModel]
    removed_services: List[ServiceModel]
    changed_services: List[ServiceChangeModel]
    added_vulnerabilities: List[VulnerabilityChangeModel]
    removed_vulnerabilities: List[VulnerabilityChangeModel]


# Startup/Shutdown events
@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global snapshot_store, host_service

    snapshot_store = SnapshotStore(settings.storage.db_path)
    host_service = HostDiffService(snapshot_store)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    global snapshot_store, host_service

    if snapshot_store is not None:
        snapshot_store.close()
    snapshot_store = None
    host_service = None


@app.exception_handler(HostDiffError)
async def host_diff_error_handler(request: Request, exc: HostDiffError):
    """Translate domain errors into HTTP responses."""
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.warning(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.detail, "error_code": exc.error_code}
    )


def _get_service() -> HostDiffService:
    if host_service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return host_service


# ============================================
# Health & Status Endpoints
# ============================================

@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "snapshots_count": snapshot_store.count() if snapshot_store else 0
    }


# ============================================
# Snapshot Endpoints
# ============================================
# Plain def: these run on the worker thread pool and share the store

@app.post("/api/snapshots", response_model=SnapshotInfoResponse, status_code=201)
def upload_snapshot(file: UploadFile = File(...)):
    """
    Upload a host snapshot.

    The filename must look like host_<ip>_<YYYY-MM-DDTHH-MM-SSZ>.json;
    the address and timestamp are taken from it.
    """
    service = _get_service()
    content = file.file.read()

    max_bytes = settings.server.max_upload_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Snapshot exceeds {settings.server.max_upload_mb} MB"
        )

    info = service.upload_snapshot(file.filename or "", content)
    logger.info(f"Uploaded {file.filename} as snapshot {info.id}")
    return info.to_dict()


@app.get("/api/hosts/{address}/snapshots", response_model=HostHistoryResponse)
def get_host_history(address: str):
    """List a host's snapshots, newest first."""
    service = _get_service()
    snapshots = service.get_host_history(address)
    return {
        "address": address,
        "snapshots": [s.to_dict() for s in snapshots]
    }


@app.get("/api/compare", response_model=DiffReportResponse)
def compare_snapshots(
    snapshot_a: str = Query(..., description="Earlier snapshot id"),
    snapshot_b: str = Query(..., description="Later snapshot id")
):
    """Compare two snapshots of the same host."""
    service = _get_service()
    report = service.compare_snapshots(snapshot_a, snapshot_b)
    return report.to_dict()
