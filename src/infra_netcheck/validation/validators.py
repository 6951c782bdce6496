"""公共验证器函数"""
from __future__ import annotations

import math
from typing import Optional, Sequence

from ..core.types import ErrorList, FieldPath, invalid, not_supported


def validate_enum(
    value: Optional[str],
    allowed: Sequence[str],
    path: FieldPath,
) -> ErrorList:
    """验证取值属于固定集合

    Args:
        value: 要验证的值，空值或 None 不触发
        allowed: 合法取值，按声明顺序出现在错误详情中
        path: 字段路径

    Returns:
        错误列表，最多一个 NotSupported
    """
    errors = ErrorList()
    if value and value not in allowed:
        errors.append(not_supported(path, value, allowed))
    return errors


def validate_in_range(
    value: float,
    low: float,
    high: float,
    path: FieldPath,
) -> ErrorList:
    """验证数值位于闭区间 [low, high]

    Args:
        value: 要验证的值，NaN 视为越界
        low: 下界
        high: 上界
        path: 字段路径

    Returns:
        错误列表，最多一个 Invalid
    """
    errors = ErrorList()
    if math.isnan(value) or not (low <= value <= high):
        errors.append(invalid(path, value, "must contain a valid value"))
    return errors
