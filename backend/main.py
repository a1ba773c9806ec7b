import logging
import os

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from db.base import Base
from db.session import engine
from routers.records import router as records_router
from services.bootstrap import ensure_seeded
from services.deps import get_store
from services.errors import SheetError

# --------------------------------------------------
# LOGGING
# --------------------------------------------------
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


# --------------------------------------------------
# APP
# --------------------------------------------------
app = FastAPI(
    title="Sheet Records API",
    version="1.0.0",
)

# --------------------------------------------------
# DB INIT
# --------------------------------------------------
@app.on_event("startup")
def _init_db():
    Base.metadata.create_all(bind=engine)
    if _flag("SEED_ON_STARTUP"):
        summary = ensure_seeded(get_store())
        logger.info("SEED: %s", summary)

# --------------------------------------------------
# CORS
# --------------------------------------------------
allowed_origins = [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --------------------------------------------------
# ERRORS
# --------------------------------------------------
@app.exception_handler(SheetError)
def _sheet_error(request: Request, exc: SheetError):
    if exc.status_code < 500:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
def _invalid_body(request: Request, exc: RequestValidationError):
    logger.warning("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
def _unexpected_error(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# --------------------------------------------------
# ROUTERS
# --------------------------------------------------
app.include_router(records_router)


# --------------------------------------------------
# CORS PREFLIGHT (EXPLICIT)
# --------------------------------------------------
@app.options("/{path:path}")
def preflight(path: str, request: Request):
    return Response(status_code=200)


# --------------------------------------------------
# HEALTH CHECK
# --------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}
