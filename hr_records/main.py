import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import ALLOWED_ORIGINS, CREATE_TABLES, LOG_LEVEL, SEED_SAMPLE_DATA, TIMEZONE
from .db import Base, SessionLocal, engine, session_scope
from .errors import STATUS_BY_KIND, ServiceError, ValidationError
from .routers import employees, attendance, stats
from .seed import seed_sample_data
from .service import HRService
from .store import SqlRecordStore
from . import models  # noqa: F401 - registers tables on Base.metadata

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
logger = logging.getLogger(__name__)

# ----------------------------
# Startup
# ----------------------------
def _prepare_database():
    if CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    if SEED_SAMPLE_DATA:
        with session_scope(SessionLocal) as db:
            seed_sample_data(HRService(SqlRecordStore(db), tz=TIMEZONE))

@asynccontextmanager
async def lifespan(app: FastAPI):
    _prepare_database()
    yield

# Initialize FastAPI application
app = FastAPI(title="HR Records API", version="1.0.0", lifespan=lifespan)

if ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(employees.router)
app.include_router(attendance.router)
app.include_router(stats.router)

# ----------------------------
# Error mapping
# ----------------------------
@app.exception_handler(ServiceError)
def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=STATUS_BY_KIND[exc.kind], content=exc.to_dict())

@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    # Report the first problem only, with the wire (camelCase) field name
    first = exc.errors()[0] if exc.errors() else {}
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "path", "query")]
    error = ValidationError(first.get("msg", "Invalid request"), field=".".join(loc) if loc else None)
    return service_error_handler(request, error)

@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

# Health check endpoint
@app.get("/health")
def health():
    return {"status": "ok"}
