"""Configuration loader for static site deployments."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_SUB_DOMAIN = "www"


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  name: str  # Stack name; also prefixes the bucket name
  domain_name: str | None = None
  site_sub_domain: str = DEFAULT_SUB_DOMAIN
  hosted_zone_id: str | None = None  # Skip the Route 53 lookup when known
  region: str = "us-east-1"
  owner: str | None = None
  email: str | None = None

  @property
  def site_domain(self) -> str | None:
    """Full site domain, or None when no custom domain is configured."""
    if not self.domain_name:
      return None
    return f"{self.site_sub_domain}.{self.domain_name}"


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      sites.append(
        SiteConfig(
          name=merged["name"],
          domain_name=merged.get("domain_name"),
          site_sub_domain=merged.get("site_sub_domain", DEFAULT_SUB_DOMAIN),
          hosted_zone_id=merged.get("hosted_zone_id"),
          region=merged.get("region", "us-east-1"),
          owner=merged.get("owner"),
          email=merged.get("email"),
        )
      )

    return cls(sites=sites)
