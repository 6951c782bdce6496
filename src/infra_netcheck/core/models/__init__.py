"""
Models 包 - 基础设施配置数据模型
"""

from .base import BaseConfig
from .network import CloudRouter, FlowLogs, NetworkConfig, VPC
from .infrastructure import InfrastructureConfig
from .report import ValidationReport

__all__ = [
    "BaseConfig",
    "CloudRouter",
    "FlowLogs",
    "NetworkConfig",
    "VPC",
    "InfrastructureConfig",
    "ValidationReport",
]
