"""
Middleware for the healing texts API.
Provides CORS, request logging and error handling.
"""

import time
from typing import Callable
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from utils import api_logger, config_manager, HealingSystemError, RecordNotFoundError, create_error_response


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            response = await call_next(request)

            process_time = time.time() - start_time
            api_logger.info(f"[API] {request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

            # 添加处理时间到响应头
            response.headers["X-Process-Time"] = str(process_time)

            return response

        except Exception as e:
            process_time = time.time() - start_time
            api_logger.error(f"[API] {request.method} {request.url.path} - ERROR - {process_time:.3f}s - {str(e)}")
            raise


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """错误处理中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except HealingSystemError as e:
            api_logger.error(f"[API] System error: {str(e)}")
            return JSONResponse(status_code=500, content=create_error_response(e))

        except Exception as e:
            api_logger.error(f"[API] Unexpected error: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal Server Error",
                    "error_code": "INTERNAL_ERROR",
                    "timestamp": time.time()
                }
            )


async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    """记录不存在时返回 404 与统一的错误信息"""
    api_logger.info(f"[API] {exc}")
    return JSONResponse(status_code=404, content={"error": RecordNotFoundError.public_message})


def setup_cors(app: FastAPI):
    """设置CORS"""
    cors_origins = config_manager.get_api_config().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def setup_middleware(app: FastAPI):
    """设置所有中间件与异常处理器"""
    app.add_exception_handler(RecordNotFoundError, record_not_found_handler)

    setup_cors(app)

    # 后添加的中间件位于外层
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)

    api_logger.info("[API] Middleware setup completed")
