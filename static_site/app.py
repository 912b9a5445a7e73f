#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_site.config import Config
from static_site.stacks.site_stack import StaticSiteStack
from static_site.zones import resolve_site_domain


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Get account ID from credentials
  account_id = get_account_id()

  # Resolve every custom domain before declaring anything; a missing zone is fatal
  domains = {site.name: resolve_site_domain(site) for site in config.sites}

  # Create a stack for each site
  for site in config.sites:
    domain = domains[site.name]
    StaticSiteStack(
      app,
      site.name,
      site_config=site,
      domain=domain,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.site_domain or site.name}",
    )

  app.synth()


if __name__ == "__main__":
  main()
