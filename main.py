import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import RedirectResponse

from core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Trip Prep Navigator API",
    description="Generates, stores and exports packing checklists for trips.",
    version="0.1.0",
)

# Allow the frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/", tags=["Root"])
def read_root():
    """Redirect to the frontend index.html"""
    return RedirectResponse(url="/frontend/index.html")

from api.routers import auth, checklists, destinations

# Mount all routers with the /api prefix
app.include_router(auth.router, prefix="/api")
app.include_router(checklists.router, prefix="/api")
app.include_router(destinations.router, prefix="/api")

# Serve the frontend build if it sits next to the backend
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "frontend")
if os.path.exists(frontend_dir):
    app.mount("/frontend", StaticFiles(directory=frontend_dir), name="frontend")
    logger.info(f"Serving frontend from {frontend_dir}")
