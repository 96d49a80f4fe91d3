from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from hobbies.core.db import get_session
from hobbies.core.errors import storage_error_detail
from hobbies.models import Person
from datetime import datetime

router = APIRouter()

@router.get("/")
def health_check():
    """basic liveness check"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": "hobbies"
    }

@router.get("/ready")
def readiness_check(session: Session = Depends(get_session)):
    """readiness check - verifies the people table can be queried"""
    checks = {}
    all_healthy = True

    try:
        session.exec(select(Person).limit(1)).first()
        checks["database"] = {"status": "healthy", "message": "connected"}
    except SQLAlchemyError as e:
        checks["database"] = {"status": "unhealthy", "message": storage_error_detail(e)}
        all_healthy = False

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content={
            "status": "healthy" if all_healthy else "unhealthy",
            "timestamp": datetime.utcnow().isoformat(),
            "checks": checks
        },
    )
