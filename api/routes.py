"""
API routes for the healing texts system.
All endpoints are read-only views over the catalog store.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from catalog import CatalogStore, QuoteRecord, catalog_store

from .models import ErrorResponse

router = APIRouter()


def get_catalog_store() -> CatalogStore:
    """目录依赖，测试中可通过 dependency_overrides 替换"""
    return catalog_store


@router.get(
    "/healing-texts",
    response_model=List[QuoteRecord],
    response_model_exclude_none=True,
    tags=["HealingTexts"]
)
async def get_healing_texts(
    category: Optional[str] = Query(None, description="分类标签，'all' 或缺省返回全部"),
    store: CatalogStore = Depends(get_catalog_store)
):
    """获取全部治愈系文字"""
    if category is None:
        return list(store.all())
    return store.filter_by_category(category)


@router.get(
    "/healing-texts/{healing_id}",
    response_model=QuoteRecord,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
    tags=["HealingTexts"]
)
async def get_healing_text(healing_id: str, store: CatalogStore = Depends(get_catalog_store)):
    """根据ID获取治愈系文字，找不到时由异常处理器返回 404"""
    return store.find(healing_id)


@router.get("/categories", response_model=List[str], tags=["Categories"])
async def get_categories(store: CatalogStore = Depends(get_catalog_store)):
    """获取分类列表（去重，按首次出现顺序）"""
    return store.categories()
