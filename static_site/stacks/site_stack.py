"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_site.cdk_constructs import StaticSiteConstruct
from static_site.config import DEFAULT_SUB_DOMAIN, SiteConfig
from static_site.zones import SiteDomain


class StaticSiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    domain: SiteDomain | None = None,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      domain=domain,
      site_sub_domain=None if domain else _explicit_sub_domain(site_config),
    )

    # Tag resources with owner info
    cdk.Tags.of(self).add("Project", "static-sites")
    cdk.Tags.of(self).add("Site", site_config.name)
    if site_config.owner:
      cdk.Tags.of(self).add("Owner", site_config.owner)
    if site_config.email:
      cdk.Tags.of(self).add("OwnerEmail", site_config.email)


def _explicit_sub_domain(site_config: SiteConfig) -> str | None:
  # Only a sub domain set on purpose is worth a warning
  if site_config.site_sub_domain == DEFAULT_SUB_DOMAIN:
    return None
  return site_config.site_sub_domain
