"""
Data models for the healing texts catalog.
"""

from typing import Optional
from pydantic import BaseModel, Field


class QuoteRecord(BaseModel):
    """治愈系文字记录"""
    id: int = Field(..., gt=0, description="唯一ID")
    text: str = Field(..., description="文字内容")
    image: str = Field(..., description="图片路径或URL")
    category: str = Field(..., description="分类标签")
    author: Optional[str] = Field(None, description="作者")
    source: Optional[str] = Field(None, description="出处")

    class Config:
        frozen = True
