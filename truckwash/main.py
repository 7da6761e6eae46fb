"""
FastAPI application entry point.
Includes session middleware, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from truckwash.routers import (
    auth,
    companies,
    health,
    permissions,
    reference,
    reports,
    users,
    vehicles,
    washes,
)
from truckwash.database import create_tables, ensure_reference_rows
from truckwash.config import settings
from truckwash.exceptions import TruckWashError
from truckwash.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Truck Wash API",
    description="Wash recording, fleet reconciliation, wash lists and invoices.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Signed session cookie ────────────────────────────────────────────────────
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE_SECONDS,
    same_site="lax",
    https_only=settings.SESSION_HTTPS_ONLY,
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(TruckWashError)
async def domain_exception_handler(request: Request, exc: TruckWashError):
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{exc.kind} on {request.url.path}: {exc.message}")
    else:
        logger.debug(f"{exc.kind} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"kind": "validation_error", "detail": "Invalid request data", "details": errors},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"kind": "internal_error", "detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(auth.router,        prefix="/api", tags=["🔑 Auth"])
app.include_router(washes.router,      prefix="/api", tags=["🚿 Washes"])
app.include_router(vehicles.router,    prefix="/api", tags=["🚛 Fleet"])
app.include_router(companies.router,   prefix="/api", tags=["🏢 Companies"])
app.include_router(reference.router,   prefix="/api", tags=["📋 Wash Types & Locations"])
app.include_router(reports.router,     prefix="/api", tags=["🧾 Wash Lists & Invoices"])
app.include_router(permissions.router, prefix="/api", tags=["🛡️  Permissions"])
app.include_router(users.router,       prefix="/api", tags=["👥 Users"])
app.include_router(health.router,      prefix="/api", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Truck Wash backend starting up...")
    create_tables()
    ensure_reference_rows()
    logger.info("✅ Database tables and reference rows ready")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Truck Wash backend shutting down...")
