"""
核心类型定义模块
使用 Pydantic v2 描述字段路径、校验错误以及 Success/Failure 结果类型
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


# 基础 Pydantic 配置
class BaseTypeModel(BaseModel):
    """基础类型模型配置"""
    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        arbitrary_types_allowed=True,  # 允许任意类型
    )


# 错误类型
class ErrorType(str, Enum):
    """字段错误类型枚举"""
    INVALID = "FieldValueInvalid"
    REQUIRED = "FieldValueRequired"
    NOT_SUPPORTED = "FieldValueNotSupported"
    FORBIDDEN = "FieldValueForbidden"

    @property
    def label(self) -> str:
        """人类可读的错误类型"""
        labels = {
            ErrorType.INVALID: "Invalid value",
            ErrorType.REQUIRED: "Required value",
            ErrorType.NOT_SUPPORTED: "Unsupported value",
            ErrorType.FORBIDDEN: "Forbidden",
        }
        return labels[self]

    @property
    def reports_value(self) -> bool:
        """错误信息中是否包含字段值"""
        return self in (ErrorType.INVALID, ErrorType.NOT_SUPPORTED)


class FieldPath(BaseTypeModel):
    """不可变的点分字段路径，例如 networks.vpc.name"""
    segments: Tuple[str, ...] = Field(default=(), description="路径片段")

    @classmethod
    def new(cls, *names: str) -> FieldPath:
        """创建根路径"""
        return cls(segments=tuple(names))

    def child(self, *names: str) -> FieldPath:
        """派生子路径"""
        return FieldPath(segments=self.segments + tuple(names))

    def __str__(self) -> str:
        return ".".join(self.segments)


def path_string(path: Optional[FieldPath]) -> str:
    """路径转字符串，缺失的路径渲染为空串"""
    return str(path) if path is not None else ""


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True, exclude_none=True)
    return str(value)


class FieldError(BaseTypeModel):
    """单个字段校验错误"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: ErrorType = Field(description="错误类型")
    field: str = Field(description="点分字段路径")
    bad_value: Any = Field(default=None, description="出错的字段值")
    detail: str = Field(default="", description="错误详情")

    def error_body(self) -> str:
        """不带字段路径的错误描述"""
        body = self.type.label
        if self.type.reports_value:
            body = f"{body}: {_format_value(self.bad_value)}"
        if self.detail:
            body = f"{body}: {self.detail}"
        return body

    def __str__(self) -> str:
        return f"{self.field}: {self.error_body()}"


def invalid(path: Optional[FieldPath], value: Any, detail: str) -> FieldError:
    return FieldError(type=ErrorType.INVALID, field=path_string(path), bad_value=value, detail=detail)


def required(path: Optional[FieldPath], detail: str) -> FieldError:
    return FieldError(type=ErrorType.REQUIRED, field=path_string(path), detail=detail)


def forbidden(path: Optional[FieldPath], detail: str) -> FieldError:
    return FieldError(type=ErrorType.FORBIDDEN, field=path_string(path), detail=detail)


def not_supported(path: Optional[FieldPath], value: Any, valid_values: Sequence[str]) -> FieldError:
    """不支持的取值，详情按声明顺序列出全部合法值"""
    detail = ""
    if valid_values:
        detail = "supported values: " + ", ".join(f'"{v}"' for v in valid_values)
    return FieldError(type=ErrorType.NOT_SUPPORTED, field=path_string(path), bad_value=value, detail=detail)


class ErrorList(List[FieldError]):
    """有序的字段错误列表"""

    def __init__(self, errors: Iterable[FieldError] = ()):
        super().__init__(errors)

    def to_aggregate(self) -> Optional[str]:
        """合并为单条错误消息；无错误时返回 None"""
        if not self:
            return None
        messages = [str(e) for e in self]
        if len(messages) == 1:
            return messages[0]
        return "[" + ", ".join(messages) + "]"


# 结果类型 - 使用 Pydantic 模型，支持位置参数
class Success(BaseTypeModel):
    """成功结果模型，支持位置参数和关键字参数"""
    value: Any = Field(description="成功返回的值")
    message: Optional[str] = Field(default=None, description="成功消息")

    def __init__(self, *args, **kwargs):
        """支持的调用方式：Success(value) / Success(value, message) / 关键字参数"""
        if len(args) == 1 and not kwargs:
            super().__init__(value=args[0])
        elif len(args) == 2 and not kwargs:
            super().__init__(value=args[0], message=args[1])
        elif len(args) == 0:
            super().__init__(**kwargs)
        else:
            raise TypeError(f"Invalid arguments for Success: args={args}, kwargs={kwargs}")

    @computed_field
    @property
    def is_success(self) -> bool:
        return True


class Failure(BaseTypeModel):
    """失败结果模型，支持位置参数和关键字参数"""
    error: str = Field(description="错误信息")
    error_code: Optional[str] = Field(default=None, description="错误代码")
    details: Optional[Dict[str, Any]] = Field(default=None, description="错误详情")

    def __init__(self, *args, **kwargs):
        """支持的调用方式：Failure(error) / Failure(error, error_code) / 关键字参数"""
        if len(args) == 1 and not kwargs:
            super().__init__(error=args[0])
        elif len(args) == 2 and not kwargs:
            super().__init__(error=args[0], error_code=args[1])
        elif len(args) == 3 and not kwargs:
            super().__init__(error=args[0], error_code=args[1], details=args[2])
        elif len(args) == 0:
            super().__init__(**kwargs)
        else:
            raise TypeError(f"Invalid arguments for Failure: args={args}, kwargs={kwargs}")

    @computed_field
    @property
    def is_success(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, exc: Exception, error_code: Optional[str] = None) -> 'Failure':
        """从异常创建失败结果"""
        return cls(
            error=str(exc),
            error_code=error_code or exc.__class__.__name__,
            details={"exception_type": exc.__class__.__name__}
        )


Result = Union[Success, Failure]
