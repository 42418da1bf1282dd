# ============================================================================
# FILE: tracknest/main.py
# ============================================================================
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from tracknest.api.v1.router import api_router
from tracknest.core.logging import setup_logging
from tracknest.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="TrackNest API",
    description="Music discovery with playlists, likes, charts and recommendations",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Every error body is {"message": ...}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"Invalid value for {field}." if field else "Invalid request."
    logger.info(f"Rejected request to {request.url.path}: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

# Include API router
app.include_router(api_router, prefix="/api")

@app.on_event("startup")
async def startup_event():
    """Create database tables on startup"""
    logger.info("Starting TrackNest API")
    from tracknest.db.base import Base, import_models
    from tracknest.db.session import engine
    import_models()
    Base.metadata.create_all(bind=engine)

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down TrackNest API")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def root():
    return {"message": "TrackNest Backend is running.", "version": "1.0.0", "docs": "/docs"}
