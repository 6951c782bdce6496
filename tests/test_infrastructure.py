"""Tests for InfrastructureConfig validation and update validation."""

from conftest import INVALID_CIDR, NODES, PODS, SERVICES, make_config

from infra_netcheck.core.models import CloudRouter, FlowLogs, VPC
from infra_netcheck.core.types import ErrorType
from infra_netcheck.validation import (
    validate_infrastructure_config,
    validate_infrastructure_config_update,
)


def _summary(errors):
    return [(e.type, e.field, e.detail) for e in errors]


class TestValidateInfrastructureConfig:
    """Tests for validate_infrastructure_config."""

    def test_baseline_is_accepted(self, infrastructure_config, references) -> None:
        assert validate_infrastructure_config(infrastructure_config, *references) == []

    def test_invalid_workers_cidr(self, references) -> None:
        errors = validate_infrastructure_config(make_config(workers=INVALID_CIDR), *references)
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.workers", "invalid CIDR address: invalid-cidr"),
        ]

    def test_invalid_internal_cidr(self, references) -> None:
        errors = validate_infrastructure_config(make_config(internal=INVALID_CIDR), *references)
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.internal", "invalid CIDR address: invalid-cidr"),
        ]

    def test_workers_outside_nodes(self, references) -> None:
        errors = validate_infrastructure_config(make_config(workers="1.1.1.1/32"), *references)
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.workers", 'must be a subset of "" ("10.250.0.0/16")'),
        ]

    def test_internal_overlapping_nodes_and_workers(self) -> None:
        overlapping = "10.250.1.0/30"
        config = make_config(internal=overlapping, workers=overlapping)
        errors = validate_infrastructure_config(config, overlapping, PODS, SERVICES)
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.internal", 'must not be a subset of "" ("10.250.1.0/30")'),
            (ErrorType.INVALID, "networks.internal", 'must not be a subset of "networks.workers" ("10.250.1.0/30")'),
        ]

    def test_internal_overlapping_pods_and_services(self, references) -> None:
        errors = validate_infrastructure_config(make_config(internal="100.64.0.0/10"), *references)
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.internal", 'must not overlap with "" ("100.96.0.0/11")'),
            (ErrorType.INVALID, "networks.internal", 'must not overlap with "" ("100.64.0.0/13")'),
        ]

    def test_non_canonical_cidrs(self) -> None:
        config = make_config(internal="10.10.0.4/24", workers="10.250.3.8/24")
        errors = validate_infrastructure_config(config, "10.250.0.3/16", "100.96.0.4/11", "100.64.0.5/13")
        assert len(errors) == 2
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.workers", "must be valid canonical CIDR"),
            (ErrorType.INVALID, "networks.internal", "must be valid canonical CIDR"),
        ]

    def test_non_canonical_still_checked_for_subset(self, references) -> None:
        errors = validate_infrastructure_config(make_config(workers="1.1.1.1/8"), *references)
        assert [e.detail for e in errors] == [
            "must be valid canonical CIDR",
            'must be a subset of "" ("10.250.0.0/16")',
        ]

    def test_without_references_only_own_fields_are_checked(self) -> None:
        assert validate_infrastructure_config(make_config(workers="1.1.1.1/32")) == []

    def test_missing_workers_without_nodes(self) -> None:
        errors = validate_infrastructure_config(make_config(workers=""))
        assert _summary(errors) == [
            (ErrorType.REQUIRED, "networks.workers", "must specify the network range for the worker network"),
        ]

    def test_missing_workers_falls_back_to_nodes(self, references) -> None:
        assert validate_infrastructure_config(make_config(workers=""), *references) == []

        errors = validate_infrastructure_config(make_config(workers="", internal="10.250.1.0/24"), *references)
        assert _summary(errors) == [
            (ErrorType.INVALID, "networks.internal", 'must not be a subset of "" ("10.250.0.0/16")'),
        ]

    def test_cloud_router_without_vpc_name(self, references) -> None:
        errors = validate_infrastructure_config(make_config(vpc=VPC(cloud_router=CloudRouter())), *references)
        assert [e.field for e in errors] == ["networks.vpc.cloudRouter", "networks.vpc.name"]

    def test_empty_flow_logs(self, references) -> None:
        errors = validate_infrastructure_config(make_config(flow_logs=FlowLogs()), *references)
        assert _summary(errors) == [
            (
                ErrorType.REQUIRED,
                "networks.flowLogs",
                "at least one VPC flow log parameter must be specified when VPC flow log section is provided",
            ),
        ]

    def test_wrong_flow_logs(self, references) -> None:
        flow_logs = FlowLogs(aggregation_interval="foo", flow_sampling=1.2, metadata="foo")
        errors = validate_infrastructure_config(make_config(flow_logs=flow_logs), *references)
        assert [(e.type, e.field) for e in errors] == [
            (ErrorType.NOT_SUPPORTED, "networks.flowLogs.aggregationInterval"),
            (ErrorType.NOT_SUPPORTED, "networks.flowLogs.metadata"),
            (ErrorType.INVALID, "networks.flowLogs.flowSampling"),
        ]

    def test_correct_flow_logs(self, references) -> None:
        flow_logs = FlowLogs(aggregation_interval="INTERVAL_1_MIN", flow_sampling=0.5, metadata="INCLUDE_ALL_METADATA")
        assert validate_infrastructure_config(make_config(flow_logs=flow_logs), *references) == []

    def test_errors_follow_field_order(self, references) -> None:
        config = make_config(
            workers=INVALID_CIDR,
            internal=INVALID_CIDR,
            vpc=VPC(cloud_router=CloudRouter()),
            flow_logs=FlowLogs(),
        )
        errors = validate_infrastructure_config(config, *references)
        assert [e.field for e in errors] == [
            "networks.workers",
            "networks.internal",
            "networks.vpc.cloudRouter",
            "networks.vpc.name",
            "networks.flowLogs",
        ]


class TestValidateInfrastructureConfigUpdate:
    """Tests for validate_infrastructure_config_update."""

    def test_unchanged_config(self, infrastructure_config, references) -> None:
        assert validate_infrastructure_config_update(infrastructure_config, infrastructure_config, *references) == []

    def test_equal_copies(self, infrastructure_config, references) -> None:
        copy = infrastructure_config.deep_copy()
        assert copy is not infrastructure_config
        assert validate_infrastructure_config_update(infrastructure_config, copy, *references) == []

    def test_changing_network_section(self, infrastructure_config, references) -> None:
        new_config = infrastructure_config.with_networks(vpc=VPC(name="name"))
        errors = validate_infrastructure_config_update(infrastructure_config, new_config, *references)
        assert [(e.type, e.field) for e in errors] == [(ErrorType.INVALID, "networks")]
        assert errors[0].detail == "field is immutable"

    def test_one_error_for_many_changes(self, infrastructure_config, references) -> None:
        new_config = infrastructure_config.with_networks(
            vpc=VPC(name="name"),
            internal="10.20.0.0/24",
            flow_logs=FlowLogs(flow_sampling=0.1),
        )
        errors = validate_infrastructure_config_update(infrastructure_config, new_config, *references)
        assert [e.field for e in errors] == ["networks"]

    def test_new_config_is_validated(self, infrastructure_config, references) -> None:
        new_config = infrastructure_config.with_networks(workers=INVALID_CIDR)
        errors = validate_infrastructure_config_update(infrastructure_config, new_config, *references)
        assert [e.field for e in errors] == ["networks.workers", "networks"]

    def test_envelope_changes_are_ignored(self, infrastructure_config, references) -> None:
        new_config = infrastructure_config.model_copy(update={"kind": "InfrastructureConfig"})
        assert validate_infrastructure_config_update(infrastructure_config, new_config, *references) == []
