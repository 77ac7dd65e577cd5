"""
Catalog store for the healing texts system.
Read-only, in-memory access to the embedded quote records.
"""

import re
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from utils import catalog_logger, CatalogError, RecordNotFoundError, ErrorCodes

from .data import HEALING_DATA
from .models import QuoteRecord

# 不做筛选的分类值
ALL_CATEGORIES = "all"

# 路径ID的前缀整数：可选空白与符号，十六进制前缀或十进制数字（仅 ASCII）
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))")


class CatalogStore:
    """不可变的治愈系文字目录"""

    def __init__(self, records: Iterable[Union[QuoteRecord, Dict[str, Any]]]):
        items = tuple(
            record if isinstance(record, QuoteRecord) else QuoteRecord(**record)
            for record in records
        )

        seen = set()
        for record in items:
            if record.id in seen:
                raise CatalogError(
                    f"Duplicate healing text id: {record.id}",
                    ErrorCodes.CATALOG_DUPLICATE_ID,
                    context={"record_id": record.id}
                )
            seen.add(record.id)

        self._records: Tuple[QuoteRecord, ...] = items
        catalog_logger.info(f"[Catalog] Loaded {len(items)} healing texts")

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[QuoteRecord]:
        return iter(self._records)

    def all(self) -> Tuple[QuoteRecord, ...]:
        """返回全部记录（保持目录顺序）"""
        return self._records

    def get(self, record_id: int) -> QuoteRecord:
        """按ID线性查找记录，不存在时抛出 RecordNotFoundError"""
        for record in self._records:
            if record.id == record_id:
                return record
        raise RecordNotFoundError(record_id)

    def find(self, raw_id: str) -> QuoteRecord:
        """按路径中的原始ID查找，非数字ID与不存在的ID同样处理"""
        record_id = parse_id(raw_id)
        if record_id is None:
            catalog_logger.debug(f"[Catalog] Non-numeric id requested: {raw_id!r}")
            raise RecordNotFoundError(raw_id)
        return self.get(record_id)

    def categories(self) -> List[str]:
        """返回去重后的分类列表，按首次出现的顺序"""
        return list(dict.fromkeys(record.category for record in self._records))

    def filter_by_category(self, category: str = ALL_CATEGORIES) -> List[QuoteRecord]:
        """按分类筛选，'all' 返回全部"""
        return filter_records(self._records, category)


def parse_id(raw_id: Any) -> Optional[int]:
    """
    取路径片段开头的整数，其余字符忽略

    "5abc" -> 5, "7.9" -> 7, "1_1" -> 1, "0x0A" -> 10；
    开头没有数字时返回 None。
    """
    if not isinstance(raw_id, str):
        return None
    match = _LEADING_INT.match(raw_id)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    value = int(hex_digits, 16) if hex_digits is not None else int(digits)
    return -value if sign == "-" else value


def filter_records(records: Iterable[QuoteRecord], category: str = ALL_CATEGORIES) -> List[QuoteRecord]:
    """分类筛选规则，服务端与客户端共用"""
    if category == ALL_CATEGORIES:
        return list(records)
    return [record for record in records if record.category == category]


# 全局目录实例
catalog_store = CatalogStore(HEALING_DATA)
