"""基础设施配置模块"""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseConfig
from .network import NetworkConfig


class InfrastructureConfig(BaseConfig):
    """基础设施配置，网络部分创建后不可修改"""

    api_version: Optional[str] = Field(default=None, description="序列化文档的 apiVersion")
    kind: Optional[str] = Field(default=None, description="序列化文档的 kind")
    networks: NetworkConfig = Field(default_factory=NetworkConfig, description="网络配置")

    def deep_copy(self) -> InfrastructureConfig:
        """返回独立的深拷贝快照"""
        return self.model_copy(deep=True)

    def with_networks(self, **changes) -> InfrastructureConfig:
        """返回仅网络字段不同的新快照"""
        return self.model_copy(update={"networks": self.networks.model_copy(update=changes)}, deep=True)
