"""校验报告模块"""
from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .base import BaseConfig
from ..types import ErrorList, ErrorType, FieldError


class ValidationReport(BaseConfig):
    """一次校验的汇总结果"""
    accepted: bool = Field(description="配置是否被接受")
    source: str = Field(default="", description="被校验的配置来源")
    errors: List[FieldError] = Field(default_factory=list, description="错误列表")

    @classmethod
    def from_errors(cls, errors: ErrorList, source: str = "") -> ValidationReport:
        return cls(accepted=not errors, source=source, errors=list(errors))

    def count_by_type(self) -> Dict[str, int]:
        """按错误类型统计"""
        counts: Dict[str, int] = {}
        for error in self.errors:
            key = ErrorType(error.type).value
            counts[key] = counts.get(key, 0) + 1
        return counts
