"""
InfrastructureConfig 校验
网段合法性、规范形式、包含/不重叠关系，以及更新时网络部分的不可变性
"""

from __future__ import annotations

from typing import Optional

from ..config.defaults import NETWORKS_FIELD
from ..core.models import InfrastructureConfig, NetworkConfig
from ..core.types import ErrorList, FieldPath, invalid, required
from ..utils.logging import get_logger
from .cidr import CIDR, validate_cidr_is_canonical
from .structural import validate_flow_logs, validate_vpc

logger = get_logger(__name__)


def _reference_cidr(value: Optional[str]) -> Optional[CIDR]:
    """调用方提供的集群网段，字段路径为空"""
    return CIDR.new(value) if value is not None else None


def _validate_workers(
    networks: NetworkConfig,
    path: FieldPath,
    nodes: Optional[CIDR],
) -> tuple[ErrorList, Optional[CIDR]]:
    """返回 Workers 相关错误以及生效的 Workers 网段"""
    errors = ErrorList()
    if not networks.workers:
        if nodes is None:
            errors.append(required(path, "must specify the network range for the worker network"))
        # 未单独配置时 Nodes 网段即 Workers 网段
        return errors, nodes

    workers = CIDR.new(networks.workers, path)
    errors.extend(workers.validate_parse())
    errors.extend(validate_cidr_is_canonical(path, networks.workers))
    if nodes is not None:
        errors.extend(nodes.validate_subset(workers))
    return errors, workers


def _validate_internal(
    internal_value: str,
    path: FieldPath,
    nodes: Optional[CIDR],
    pods: Optional[CIDR],
    services: Optional[CIDR],
    workers: Optional[CIDR],
) -> ErrorList:
    errors = ErrorList()
    internal = CIDR.new(internal_value, path)
    errors.extend(internal.validate_parse())
    errors.extend(validate_cidr_is_canonical(path, internal_value))

    for reference in (pods, services):
        if reference is not None:
            errors.extend(reference.validate_overlap(internal))
    if nodes is not None:
        errors.extend(nodes.validate_not_subset(internal))
    # 回退到 Nodes 网段时 Workers 检查与 Nodes 检查相同
    if workers is not None and workers is not nodes:
        errors.extend(workers.validate_not_subset(internal))
    return errors


def validate_infrastructure_config(
    config: InfrastructureConfig,
    nodes_cidr: Optional[str] = None,
    pods_cidr: Optional[str] = None,
    services_cidr: Optional[str] = None,
) -> ErrorList:
    """校验基础设施配置

    错误按字段声明顺序排列：workers、internal、vpc、flowLogs。
    空列表表示配置被接受。

    Args:
        config: 待校验的配置
        nodes_cidr: 集群 Nodes 网段，Workers 必须是它的子集
        pods_cidr: 集群 Pods 网段
        services_cidr: 集群 Services 网段

    Returns:
        所有校验错误
    """
    errors = ErrorList()
    networks = config.networks
    networks_path = FieldPath.new(NETWORKS_FIELD)

    nodes = _reference_cidr(nodes_cidr)
    pods = _reference_cidr(pods_cidr)
    services = _reference_cidr(services_cidr)

    worker_errors, workers = _validate_workers(networks, networks_path.child("workers"), nodes)
    errors.extend(worker_errors)

    if networks.internal is not None:
        errors.extend(_validate_internal(
            networks.internal,
            networks_path.child("internal"),
            nodes,
            pods,
            services,
            workers,
        ))

    if networks.vpc is not None:
        errors.extend(validate_vpc(networks.vpc, networks_path.child("vpc")))

    if networks.flow_logs is not None:
        errors.extend(validate_flow_logs(networks.flow_logs, networks_path.child("flowLogs")))

    logger.debug(
        "infrastructure_config_validated",
        error_count=len(errors),
        workers=networks.workers,
        internal=networks.internal,
    )
    return errors


def validate_infrastructure_config_update(
    old_config: InfrastructureConfig,
    new_config: InfrastructureConfig,
    nodes_cidr: Optional[str] = None,
    pods_cidr: Optional[str] = None,
    services_cidr: Optional[str] = None,
) -> ErrorList:
    """校验配置更新：新配置本身必须合法，且网络部分不可修改

    网络部分有任何差异时只报告一个 networks 错误。
    """
    errors = validate_infrastructure_config(new_config, nodes_cidr, pods_cidr, services_cidr)

    old_networks = old_config.deep_copy().networks
    new_networks = new_config.deep_copy().networks
    if old_networks != new_networks:
        errors.append(invalid(FieldPath.new(NETWORKS_FIELD), new_networks, "field is immutable"))

    logger.debug("infrastructure_config_update_validated", error_count=len(errors))
    return errors
