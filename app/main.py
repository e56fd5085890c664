"""
Receipt Points — FastAPI application entry‑point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.receipts.errors import ReceiptParseError, ReceiptValidationError
from app.receipts.store import build_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: receipts live only as long as the process
    app.state.receipt_store = build_store(settings)
    logger.info("Receipt store ready (backend: %s)", settings.STORE_BACKEND)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Receipt submission → in-memory store → points scoring",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error mapping ────────────────────────────────────────────────────────
@app.exception_handler(ReceiptValidationError)
async def receipt_validation_handler(request: Request, exc: ReceiptValidationError):
    logger.warning("Rejected receipt: %s", exc)
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # body binding failures are reported the same way as a rejected receipt
    return await receipt_validation_handler(
        request, ReceiptValidationError(f"{len(exc.errors())} validation errors")
    )


@app.exception_handler(ReceiptParseError)
async def receipt_parse_handler(request: Request, exc: ReceiptParseError):
    logger.error("Scoring failed: %s", exc)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/")
async def root():
    return {"service": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API router ──────────────────────────────────────────────────
from app.receipts.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])
