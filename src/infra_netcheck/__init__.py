"""
Infrastructure Network Check Package

Validates the network section of a cloud infrastructure configuration:
CIDR well-formedness and canonical form, subset/overlap rules against the
cluster Nodes/Pods/Services ranges, VPC and flow log consistency, and
immutability of the network section on update.
"""

__version__ = "0.1.0"
__author__ = "Network Analyze Tool"

from .core.types import ErrorType, FieldError, ErrorList
from .core.models import InfrastructureConfig, NetworkConfig, VPC, CloudRouter, FlowLogs
from .validation import validate_infrastructure_config, validate_infrastructure_config_update

__all__ = [
    "ErrorType",
    "FieldError",
    "ErrorList",
    "InfrastructureConfig",
    "NetworkConfig",
    "VPC",
    "CloudRouter",
    "FlowLogs",
    "validate_infrastructure_config",
    "validate_infrastructure_config_update",
]
