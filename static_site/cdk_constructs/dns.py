"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from static_site.zones import HostedZoneRef


class SiteDns(Construct):
  """Existing Route 53 hosted zone and the site's alias record."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    zone: HostedZoneRef,
    site_domain: str,
  ) -> None:
    super().__init__(scope, id)

    self.site_domain = site_domain
    self.alias_record: route53.ARecord | None = None

    self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
      self,
      "HostedZone",
      hosted_zone_id=zone.zone_id,
      zone_name=zone.zone_name,
    )

  def create_alias_record(
    self, distribution: cloudfront.IDistribution
  ) -> route53.ARecord:
    """Create an A record aliasing the site domain to the distribution."""
    self.alias_record = route53.ARecord(
      self,
      "AliasRecord",
      zone=self.hosted_zone,
      record_name=self.site_domain,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
    return self.alias_record
