"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import ROOT_LOGGER_NAME, get_logger, get_settings, setup_logger
from infrastructure.database import init_db, close_db
from presentation.api.v1.endpoints import admin, dashboard, designs, freelancers, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    # Setup logging
    setup_logger(
        name=ROOT_LOGGER_NAME,
        level=settings.log_level,
        log_format=settings.log_format,
    )
    
    # Initialize database
    get_logger(__name__).info(f"Starting {settings.app_name} ({settings.environment})")
    await init_db()
    
    yield
    
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application with every router mounted."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Include routers
    app.include_router(health.router, prefix=settings.api_v1_prefix)
    app.include_router(dashboard.router, prefix=settings.api_v1_prefix)
    app.include_router(designs.router, prefix=settings.api_v1_prefix)
    app.include_router(freelancers.router, prefix=settings.api_v1_prefix)
    app.include_router(admin.router, prefix=settings.api_v1_prefix)
    
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }
    
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
