"""Shared pytest fixtures for strategyprobe tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from strategyprobe.core.registry.impl_memory import InMemoryRegistry
from strategyprobe.core.registry.models import PROVISIONER_STRATEGY, ExtensionDescriptor

# ============================================================================
# Descriptor Fixtures
# ============================================================================


@pytest.fixture
def standard_strategy() -> ExtensionDescriptor:
    """Baseline strategy descriptor."""
    return ExtensionDescriptor(
        simple_name="StandardStrategyImpl",
        qualified_name="hudson.slaves.NodeProvisioner$StandardStrategyImpl",
    )


@pytest.fixture
def no_delay_strategy() -> ExtensionDescriptor:
    """No-delay strategy descriptor."""
    return ExtensionDescriptor(
        simple_name="NoDelayProvisionerStrategy",
        qualified_name="hudson.plugins.ec2.NoDelayProvisionerStrategy",
        markers=("no-delay",),
    )


@pytest.fixture
def node_delay_strategy() -> ExtensionDescriptor:
    """Node-delay strategy descriptor."""
    return ExtensionDescriptor(
        simple_name="NodeDelayProvisionerStrategy",
        qualified_name="hudson.slaves.NodeDelayProvisionerStrategy",
    )


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def baseline_registry(
    standard_strategy: ExtensionDescriptor, no_delay_strategy: ExtensionDescriptor
) -> InMemoryRegistry:
    """Registry with the standard and no-delay strategies."""
    registry = InMemoryRegistry()
    registry.register(PROVISIONER_STRATEGY, standard_strategy)
    registry.register(PROVISIONER_STRATEGY, no_delay_strategy)
    return registry


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """YAML registry listing with the standard and no-delay strategies."""
    path = tmp_path / "registry.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                PROVISIONER_STRATEGY: [
                    {
                        "simple_name": "StandardStrategyImpl",
                        "qualified_name": "hudson.slaves.NodeProvisioner$StandardStrategyImpl",
                    },
                    {
                        "simple_name": "NoDelayProvisionerStrategy",
                        "qualified_name": "hudson.plugins.ec2.NoDelayProvisionerStrategy",
                    },
                ]
            }
        )
    )
    return path
