"""Route 53 hosted zone resolution for custom site domains."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import boto3

from static_site.config import SiteConfig


class SiteConfigurationError(ValueError):
  """A site configuration cannot be turned into infrastructure."""


class ZoneNotFoundError(SiteConfigurationError):
  """No public hosted zone exists for the configured domain."""

  def __init__(self, domain_name: str) -> None:
    super().__init__(f"No public Route 53 hosted zone found for {domain_name}")
    self.domain_name = domain_name


@dataclass(frozen=True)
class HostedZoneRef:
  """An existing Route 53 hosted zone."""

  zone_id: str
  zone_name: str


@dataclass(frozen=True)
class SiteDomain:
  """Custom domain of a site, bound to the zone that serves it."""

  zone: HostedZoneRef
  domain_name: str
  sub_domain: str

  @property
  def site_domain(self) -> str:
    return f"{self.sub_domain}.{self.domain_name}"


ZoneLookup = Callable[[str], HostedZoneRef]


def find_hosted_zone(domain_name: str, client: Any = None) -> HostedZoneRef:
  """Find the public hosted zone named exactly ``domain_name``.

  Args:
    domain_name: Zone apex, with or without the trailing dot
    client: Route 53 client (created from the default session if omitted)

  Returns:
    Reference to the matching zone

  Raises:
    ZoneNotFoundError: If no public zone has that name
  """
  route53 = client or boto3.client("route53")
  # DNS names are case-insensitive; Route 53 reports them in lowercase
  fqdn = domain_name.rstrip(".").lower() + "."

  # Zones are returned in name order starting at DNSName, so same-named zones
  # come first and one page is enough unless ten private zones share the name
  response = route53.list_hosted_zones_by_name(DNSName=fqdn, MaxItems="10")
  for zone in response.get("HostedZones", []):
    if zone["Name"].lower() != fqdn:
      break
    if zone.get("Config", {}).get("PrivateZone", False):
      continue
    return HostedZoneRef(
      zone_id=zone["Id"].removeprefix("/hostedzone/"),
      zone_name=fqdn.rstrip("."),
    )

  raise ZoneNotFoundError(domain_name)


def resolve_site_domain(
  site: SiteConfig,
  lookup: ZoneLookup = find_hosted_zone,
) -> SiteDomain | None:
  """Resolve the custom domain of a site, if it has one."""
  if not site.domain_name:
    return None

  if site.hosted_zone_id:
    zone = HostedZoneRef(zone_id=site.hosted_zone_id, zone_name=site.domain_name)
  else:
    zone = lookup(site.domain_name)

  return SiteDomain(
    zone=zone,
    domain_name=site.domain_name,
    sub_domain=site.site_sub_domain,
  )
