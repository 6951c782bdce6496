"""
CIDR 值与网段运算
解析 IPv4 CIDR，判断规范形式、子集与重叠关系
"""

from __future__ import annotations

import ipaddress
import re
from ipaddress import IPv4Network
from typing import Optional

from pydantic import Field

from ..core.types import BaseTypeModel, ErrorList, FieldPath, invalid, path_string

# address/prefix，前缀必须是十进制长度（不接受 255.255.0.0 形式的掩码）
_CIDR_PATTERN = re.compile(r"[0-9.]+/[0-9]{1,2}")


class InvalidCIDRError(ValueError):
    """无法解析的 CIDR 字符串"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"invalid CIDR address: {value}")


def parse_cidr(value: str) -> IPv4Network:
    """解析 IPv4 CIDR，主机位会被屏蔽

    Raises:
        InvalidCIDRError: 不是合法的 address/prefix 字符串
    """
    if not isinstance(value, str) or _CIDR_PATTERN.fullmatch(value) is None:
        raise InvalidCIDRError(value)
    try:
        return ipaddress.IPv4Network(value, strict=False)
    except ValueError as e:
        raise InvalidCIDRError(value) from e


def is_canonical(value: str) -> bool:
    """屏蔽主机位后重新渲染的结果与原字符串完全一致"""
    try:
        return str(parse_cidr(value)) == value
    except InvalidCIDRError:
        return False


def subset(inner: IPv4Network, outer: IPv4Network) -> bool:
    """inner 的每个地址都在 outer 范围内"""
    return inner.subnet_of(outer)


def overlaps(a: IPv4Network, b: IPv4Network) -> bool:
    """两个网段至少共享一个地址"""
    return a.overlaps(b)


class CIDR(BaseTypeModel):
    """绑定到字段路径的 CIDR 值"""
    value: str = Field(description="原始 CIDR 字符串")
    path: Optional[FieldPath] = Field(default=None, description="字段路径，参考网段为空")

    @classmethod
    def new(cls, value: str, path: Optional[FieldPath] = None) -> CIDR:
        return cls(value=value, path=path)

    @property
    def network(self) -> Optional[IPv4Network]:
        """解析后的网段，解析失败时为 None"""
        try:
            return parse_cidr(self.value)
        except InvalidCIDRError:
            return None

    def validate_parse(self) -> ErrorList:
        try:
            parse_cidr(self.value)
        except InvalidCIDRError as e:
            return ErrorList([invalid(self.path, self.value, str(e))])
        return ErrorList()

    def _reference(self) -> str:
        return f'"{path_string(self.path)}" ("{self.value}")'

    def validate_subset(self, *others: Optional[CIDR]) -> ErrorList:
        """others 必须完全落在本网段内"""
        errors = ErrorList()
        outer = self.network
        if outer is None:
            return errors
        for other in others:
            inner = other.network if other is not None else None
            if inner is None:
                continue
            if not subset(inner, outer):
                errors.append(invalid(other.path, other.value, f"must be a subset of {self._reference()}"))
        return errors

    def validate_not_subset(self, *others: Optional[CIDR]) -> ErrorList:
        """others 不得与本网段重叠

        错误消息沿用 "must not be a subset of" 的措辞，实际判断的是重叠。
        """
        errors = ErrorList()
        base = self.network
        if base is None:
            return errors
        for other in others:
            candidate = other.network if other is not None else None
            if candidate is None:
                continue
            if overlaps(base, candidate):
                errors.append(invalid(other.path, other.value, f"must not be a subset of {self._reference()}"))
        return errors

    def validate_overlap(self, *others: Optional[CIDR]) -> ErrorList:
        """others 不得与本网段重叠"""
        errors = ErrorList()
        base = self.network
        if base is None:
            return errors
        for other in others:
            candidate = other.network if other is not None else None
            if candidate is None:
                continue
            if overlaps(base, candidate):
                errors.append(invalid(other.path, other.value, f"must not overlap with {self._reference()}"))
        return errors


def validate_cidr_is_canonical(path: Optional[FieldPath], value: str) -> ErrorList:
    """可解析但非规范形式的 CIDR 报 Invalid；无法解析的交给 validate_parse"""
    errors = ErrorList()
    try:
        network = parse_cidr(value)
    except InvalidCIDRError:
        return errors
    if str(network) != value:
        errors.append(invalid(path, value, "must be valid canonical CIDR"))
    return errors
