"""
校验包
CIDR 运算、枚举/区间校验、结构校验与基础设施配置校验
"""

from .cidr import (
    CIDR, InvalidCIDRError, parse_cidr, is_canonical, subset, overlaps,
    validate_cidr_is_canonical,
)
from .validators import validate_enum, validate_in_range
from .structural import validate_vpc, validate_flow_logs
from .infrastructure import (
    validate_infrastructure_config,
    validate_infrastructure_config_update,
)

__all__ = [
    # CIDR
    'CIDR', 'InvalidCIDRError', 'parse_cidr', 'is_canonical', 'subset', 'overlaps',
    'validate_cidr_is_canonical',

    # 通用校验
    'validate_enum', 'validate_in_range',

    # 结构校验
    'validate_vpc', 'validate_flow_logs',

    # 入口
    'validate_infrastructure_config', 'validate_infrastructure_config_update',
]
