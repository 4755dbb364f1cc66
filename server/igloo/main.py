from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from igloo.config import settings
from igloo.database import engine, init_db
from igloo.errors import register_exception_handlers
from igloo.security import ADMIN_KEY_HEADER
from igloo.services.image_store import UPLOADS_URL_PREFIX
import logging
import os

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create uploads directory if it doesn't exist
os.makedirs(settings.upload_dir, exist_ok=True)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", ADMIN_KEY_HEADER],
)

register_exception_handlers(app)

# Mount static files for uploads
app.mount(UPLOADS_URL_PREFIX, StaticFiles(directory=settings.upload_dir), name="uploads")


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup"""
    init_db()
    logger.info(
        "%s is starting (database: %s)",
        settings.app_name,
        engine.url.render_as_string(hide_password=True),
    )
    if not settings.admin_key:
        logger.warning("ADMIN_KEY is not set; all admin requests will be rejected")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.api_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"ok": True}


# Import and include routers
from igloo.routes import admin, compat, public  # noqa: E402

app.include_router(public.router)
app.include_router(admin.router, prefix="/admin")
app.include_router(compat.router, prefix="/api")


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("igloo.main:app", host=settings.host, port=settings.port)
