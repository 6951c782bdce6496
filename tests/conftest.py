"""Shared fixtures for infra_netcheck tests."""

from typing import Any

import pytest

from infra_netcheck.core.models import InfrastructureConfig, NetworkConfig, VPC

PODS = "100.96.0.0/11"
SERVICES = "100.64.0.0/13"
NODES = "10.250.0.0/16"
INTERNAL = "10.10.0.0/24"
INVALID_CIDR = "invalid-cidr"


def make_config(**networks: Any) -> InfrastructureConfig:
    """Baseline configuration with selected network fields replaced."""
    fields: dict[str, Any] = {
        "vpc": VPC(name="hugo"),
        "internal": INTERNAL,
        "workers": "10.250.0.0/16",
    }
    fields.update(networks)
    return InfrastructureConfig(networks=NetworkConfig(**fields))


@pytest.fixture
def infrastructure_config() -> InfrastructureConfig:
    return make_config()


@pytest.fixture
def references() -> tuple[str, str, str]:
    return NODES, PODS, SERVICES


INFRA_YAML = """\
apiVersion: gcp.provider.extensions.gardener.cloud/v1alpha1
kind: InfrastructureConfig
networks:
  workers: 10.250.0.0/16
  internal: 10.10.0.0/24
  vpc:
    name: hugo
    cloudRouter:
      name: router
  flowLogs:
    aggregationInterval: INTERVAL_1_MIN
    flowSampling: 0.5
    metadata: INCLUDE_ALL_METADATA
"""


@pytest.fixture
def infra_file(tmp_path):
    path = tmp_path / "infra.yaml"
    path.write_text(INFRA_YAML)
    return path
