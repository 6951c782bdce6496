from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import (
    ENV_PREFIX,
    OUTPUT_DEFAULT_FORMAT,
    OUTPUT_FORMATS,
    VERBOSE_DEFAULT,
)


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量/配置文件覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    verbose: bool = Field(default=VERBOSE_DEFAULT, description="详细日志输出")
    output_format: str = Field(default=OUTPUT_DEFAULT_FORMAT, description="输出格式 (table/json)")

    # 集群范围的参考网段
    nodes_cidr: Optional[str] = Field(default=None, description="Nodes CIDR")
    pods_cidr: Optional[str] = Field(default=None, description="Pods CIDR")
    services_cidr: Optional[str] = Field(default=None, description="Services CIDR")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"unsupported output format: {v}, expected one of {', '.join(OUTPUT_FORMATS)}")
        return v

    @classmethod
    def from_file(cls, path: Optional[Path]) -> AppSettings:
        """从 YAML/JSON 设置文件加载；文件不存在时仅使用环境变量与默认值"""
        if path is None or not path.exists():
            return cls()
        file_data: Dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        if not isinstance(file_data, dict):
            raise ValueError(f"{path}: settings file must contain a mapping")
        return cls(**file_data)


__all__ = ["AppSettings"]
