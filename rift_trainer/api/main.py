"""
FastAPI main application.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rift_trainer import __version__

from .config import settings
from .routes import class_trainer, data, progress, skills_trainer

app = FastAPI(
    title="Rift Trainer API",
    description="Champion class and ability recall trainer",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(data.router, prefix="/api/data", tags=["Data"])
app.include_router(class_trainer.router, prefix="/api/class-trainer", tags=["Class Trainer"])
app.include_router(skills_trainer.router, prefix="/api/skills-trainer", tags=["Skills Trainer"])
app.include_router(progress.router, prefix="/api/progress", tags=["Progress"])


@app.get("/")
async def root():
    """API status check."""
    return {
        "status": "ok",
        "name": "Rift Trainer API",
        "version": __version__,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
