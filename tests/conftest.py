"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest

from static_site.zones import HostedZoneRef, SiteDomain


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "acme", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def site_domain() -> SiteDomain:
  """A resolved www.example.com domain."""
  return SiteDomain(
    zone=HostedZoneRef(zone_id="Z123EXAMPLE", zone_name="example.com"),
    domain_name="example.com",
    sub_domain="www",
  )
