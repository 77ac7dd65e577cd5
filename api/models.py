"""
API data models for the healing texts system.
Pydantic models for responses that are not catalog records themselves.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """错误响应模型"""
    error: str = Field(..., description="错误信息")


class HealthResponse(BaseModel):
    """健康检查响应模型"""
    status: str = Field(..., description="服务状态")
    timestamp: datetime = Field(..., description="检查时间")
    version: str = Field(..., description="API版本")
    records: int = Field(..., description="目录中的记录数", ge=0)
