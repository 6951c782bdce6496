"""
核心模块初始化
导出主要的类型和模型
"""

from .types import (
    ErrorType, FieldPath, FieldError, ErrorList,
    Success, Failure, Result,
)

from .models import (
    InfrastructureConfig, NetworkConfig, VPC, CloudRouter, FlowLogs,
)

__all__ = [
    # 类型
    'ErrorType', 'FieldPath', 'FieldError', 'ErrorList',
    'Success', 'Failure', 'Result',

    # 模型
    'InfrastructureConfig', 'NetworkConfig', 'VPC', 'CloudRouter', 'FlowLogs',
]
