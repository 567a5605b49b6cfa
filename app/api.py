from __future__ import annotations

from typing import Any, Sequence

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    TrackerError,
    ValidationError,
)
from domain.models import AuthenticatedUser, NewTrackedJob, TrackedJob
from domain.ports import LoggerPort, TokenVerifierPort
from domain.services import JobTrackerService
from domain.utils import format_timestamp

DEFAULT_PREFIX = "/api/tracker"

_STATUS_CODES: dict[type[TrackerError], int] = {
    ValidationError: 400,
    ConflictError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TrackJobRequest(_CamelModel):
    job_id: str | None = None
    title: str | None = None
    company: str | None = None
    location: str | None = None
    job_type: str | None = None
    salary: str | None = None
    apply_link: str | None = None
    description: str | None = None
    status: str | None = None


class UpdateJobRequest(_CamelModel):
    status: str | None = None
    notes: str | None = None


def serialize_job(job: TrackedJob) -> dict[str, Any]:
    return {
        "id": job.id,
        "userId": job.user_id,
        "jobId": job.job_id,
        "title": job.title,
        "company": job.company,
        "location": job.location,
        "jobType": job.job_type,
        "salary": job.salary,
        "applyLink": job.apply_link,
        "description": job.description,
        "status": job.status.value,
        "notes": [
            {"text": note.text, "createdAt": format_timestamp(note.created_at)}
            for note in job.notes
        ],
        "createdAt": format_timestamp(job.created_at),
        "updatedAt": format_timestamp(job.updated_at),
    }


# -- dependencies -------------------------------------------------------------


def get_service(request: Request) -> JobTrackerService:
    return request.app.state.tracker_service


def get_current_user(request: Request) -> AuthenticatedUser:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("No token provided")
    verifier: TokenVerifierPort = request.app.state.token_verifier
    return verifier.verify(token.strip())


# -- routes -------------------------------------------------------------------

router = APIRouter()


@router.get("/")
def list_tracked_jobs(
    user: AuthenticatedUser = Depends(get_current_user),
    service: JobTrackerService = Depends(get_service),
) -> dict[str, Any]:
    jobs = service.list_jobs(user.uid)
    return {
        "success": True,
        "trackedJobs": [serialize_job(job) for job in jobs],
        "count": len(jobs),
    }


@router.get("/stats")
def tracker_stats(
    user: AuthenticatedUser = Depends(get_current_user),
    service: JobTrackerService = Depends(get_service),
) -> dict[str, Any]:
    return {"success": True, "stats": service.get_stats(user.uid).as_dict()}


@router.get("/{tracker_id}")
def get_tracked_job(
    tracker_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: JobTrackerService = Depends(get_service),
) -> dict[str, Any]:
    job = service.get_job(tracker_id, user.uid)
    return {"success": True, "data": serialize_job(job)}


@router.post("/", status_code=201)
def track_job(
    payload: TrackJobRequest | None = None,
    user: AuthenticatedUser = Depends(get_current_user),
    service: JobTrackerService = Depends(get_service),
) -> dict[str, Any]:
    payload = payload or TrackJobRequest()
    job = service.track_job(user.uid, NewTrackedJob(**payload.model_dump()))
    return {
        "success": True,
        "message": "Job tracked successfully",
        "data": serialize_job(job),
    }


@router.put("/{tracker_id}")
def update_tracked_job(
    tracker_id: str,
    payload: UpdateJobRequest | None = None,
    user: AuthenticatedUser = Depends(get_current_user),
    service: JobTrackerService = Depends(get_service),
) -> dict[str, Any]:
    payload = payload or UpdateJobRequest()
    job = service.update_job(
        tracker_id,
        user.uid,
        status=payload.status,
        notes=payload.notes,
    )
    return {
        "success": True,
        "message": "Job updated successfully",
        "data": serialize_job(job),
    }


@router.delete("/{tracker_id}")
def delete_tracked_job(
    tracker_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: JobTrackerService = Depends(get_service),
) -> dict[str, Any]:
    service.remove_job(tracker_id, user.uid)
    return {"success": True, "message": "Job removed from tracker"}


# -- application factory ------------------------------------------------------


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


def _install_error_handlers(app: FastAPI, logger: LoggerPort) -> None:
    @app.exception_handler(TrackerError)
    async def _tracker_error(request: Request, exc: TrackerError) -> JSONResponse:
        status_code = next(
            (code for cls, code in _STATUS_CODES.items() if isinstance(exc, cls)),
            400,
        )
        return _error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = "Invalid request body"
        if errors:
            location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
            detail = errors[0].get("msg", "")
            message = f"{location}: {detail}" if location else detail or message
        return _error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error",
            method=request.method,
            path=request.url.path,
            error=repr(exc),
        )
        return _error_response(500, "Internal server error")


def create_app(
    *,
    service: JobTrackerService,
    token_verifier: TokenVerifierPort,
    logger: LoggerPort,
    allowed_origins: Sequence[str] = (),
    prefix: str = DEFAULT_PREFIX,
) -> FastAPI:
    """Build the HTTP application around an already-wired tracker service."""
    app = FastAPI(title="Job Tracker")
    app.state.tracker_service = service
    app.state.token_verifier = token_verifier

    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _install_error_handlers(app, logger)
    app.include_router(router, prefix=prefix)
    return app
