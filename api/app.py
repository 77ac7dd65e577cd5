"""
FastAPI application for the healing texts system.
Main application entry point for the API server.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Depends
from fastapi.staticfiles import StaticFiles

from catalog import CatalogStore
from utils import api_logger, config_manager, ensure_directories

from .middleware import setup_middleware
from .models import HealthResponse
from .routes import router, get_catalog_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    api_logger.info("[API] Starting Healing Texts API...")
    yield
    api_logger.info("[API] Shutting down Healing Texts API...")


def create_app(static_dir: Optional[Path] = None) -> FastAPI:
    """FastAPI 应用工厂"""
    api_config = config_manager.get_api_config()
    static_config = config_manager.get_static_config()
    public_dir = Path(static_dir or static_config.public_dir)

    # 创建必要的目录（静态文件挂载前必须存在）
    created = ensure_directories(public_dir, static_config.subdirs)
    for directory in created:
        api_logger.info(f"[API] Created directory: {directory}")

    app = FastAPI(
        title=api_config.title,
        description="Healing texts and images served from a read-only catalog",
        version=api_config.version,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan
    )

    setup_middleware(app)

    app.include_router(router, prefix="/api")

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check(store: CatalogStore = Depends(get_catalog_store)):
        """健康检查端点"""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version=api_config.version,
            records=len(store)
        )

    # 静态资源最后挂载，API 路由优先匹配
    app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="static")

    return app


if __name__ == "__main__":
    api_config = config_manager.get_api_config()

    api_logger.info(f"[API] Starting server on {api_config.host}:{api_config.port}")

    if api_config.reload:
        uvicorn.run(
            "api.app:create_app",
            factory=True,
            host=api_config.host,
            port=api_config.port,
            reload=True,
            log_level="info"
        )
    else:
        uvicorn.run(
            create_app(),
            host=api_config.host,
            port=api_config.port,
            log_level="info"
        )
