"""
HTTP access to the healing texts API for the client renderer.
"""

import asyncio
from typing import Any, List, Optional

import aiohttp

from catalog import QuoteRecord
from utils import client_logger, config_manager, log_execution, ErrorCodes

HEALING_TEXTS_PATH = "/api/healing-texts"


class CatalogClient:
    """一次性获取目录数据的客户端，失败时只记录日志"""

    def __init__(self, base_url: Optional[str] = None, session: Optional[aiohttp.ClientSession] = None):
        self.base_url = (base_url or config_manager.get_client_config().base_url).rstrip("/")
        self._session = session

    async def _request_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        if self._session is not None:
            async with self._session.get(url) as response:
                response.raise_for_status()
                return await response.json()

        async with aiohttp.ClientSession() as session:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.json()

    @log_execution("Client", "fetch_healing_data")
    async def fetch_healing_data(self) -> List[QuoteRecord]:
        """获取治愈系数据，任何失败都返回空列表（不重试）"""
        try:
            payload = await self._request_json(HEALING_TEXTS_PATH)
            records = [QuoteRecord(**item) for item in payload]
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, TypeError) as e:
            client_logger.error(f"[Client] [{ErrorCodes.CLIENT_FETCH_FAILED}] 获取数据失败: {e}")
            return []

        client_logger.info(f"[Client] Fetched {len(records)} healing texts from {self.base_url}")
        return records
