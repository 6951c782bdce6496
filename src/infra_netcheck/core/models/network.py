"""网络配置模块"""
from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from .base import BaseConfig


class CloudRouter(BaseConfig):
    """Cloud Router 引用，其余字段对校验器不透明"""

    model_config = ConfigDict(extra='allow')

    name: Optional[str] = Field(default=None, description="已存在的 Cloud Router 名称")


class VPC(BaseConfig):
    """VPC 配置"""

    name: str = Field(default="", description="已存在的 VPC 名称")
    cloud_router: Optional[CloudRouter] = Field(default=None, description="Cloud Router 配置")


class FlowLogs(BaseConfig):
    """VPC flow log 配置，None 表示未设置"""

    aggregation_interval: Optional[str] = Field(default=None, description="聚合间隔")
    flow_sampling: Optional[float] = Field(default=None, description="采样率 [0,1]")
    metadata: Optional[str] = Field(default=None, description="元数据选项")

    def is_empty(self) -> bool:
        """三个参数均未设置"""
        return self.aggregation_interval is None and self.flow_sampling is None and self.metadata is None


class NetworkConfig(BaseConfig):
    """网络配置"""

    workers: str = Field(default="", description="Workers 网段")
    internal: Optional[str] = Field(default=None, description="内部网段")
    vpc: Optional[VPC] = Field(default=None, description="VPC 配置")
    flow_logs: Optional[FlowLogs] = Field(default=None, description="VPC flow log 配置")
