"""
VPC / FlowLogs 子配置的结构校验
每个子对象内的错误全部收集，不在第一个错误处返回
"""

from __future__ import annotations

from ..config.defaults import (
    FLOW_LOG_AGGREGATION_INTERVALS,
    FLOW_LOG_METADATA_VALUES,
    FLOW_LOG_SAMPLING_MAX,
    FLOW_LOG_SAMPLING_MIN,
)
from ..core.models import FlowLogs, VPC
from ..core.types import ErrorList, FieldPath, invalid, required
from .validators import validate_enum, validate_in_range


def validate_vpc(vpc: VPC, path: FieldPath) -> ErrorList:
    """VPC 名称为空时报错；同时配置了 Cloud Router 则两个错误一起报告"""
    errors = ErrorList()
    if vpc.name:
        return errors

    if vpc.cloud_router is not None:
        errors.append(invalid(
            path.child("cloudRouter"),
            vpc.cloud_router,
            "cloud router can not be configured when the VPC name is not specified",
        ))
    errors.append(invalid(path.child("name"), vpc.name, "vpc name must not be empty when vpc key is provided"))
    return errors


def validate_flow_logs(flow_logs: FlowLogs, path: FieldPath) -> ErrorList:
    """空的 flow log 段本身即为错误，否则逐项独立校验"""
    errors = ErrorList()
    if flow_logs.is_empty():
        errors.append(required(
            path,
            "at least one VPC flow log parameter must be specified when VPC flow log section is provided",
        ))
        return errors

    if flow_logs.aggregation_interval is not None:
        errors.extend(validate_enum(
            flow_logs.aggregation_interval,
            FLOW_LOG_AGGREGATION_INTERVALS,
            path.child("aggregationInterval"),
        ))
    if flow_logs.metadata is not None:
        errors.extend(validate_enum(
            flow_logs.metadata,
            FLOW_LOG_METADATA_VALUES,
            path.child("metadata"),
        ))
    if flow_logs.flow_sampling is not None:
        errors.extend(validate_in_range(
            flow_logs.flow_sampling,
            FLOW_LOG_SAMPLING_MIN,
            FLOW_LOG_SAMPLING_MAX,
            path.child("flowSampling"),
        ))
    return errors
