"""Main composite construct for complete static website infrastructure."""

from dataclasses import dataclass

from aws_cdk import Annotations, CfnOutput, Stack
from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct

from static_site.zones import SiteDomain

from .certificate import SiteCertificate
from .distribution import SiteDistribution
from .dns import SiteDns
from .headers import SecurityHeadersPolicy
from .storage import SiteBucket


@dataclass(frozen=True)
class SiteExports:
  """Values published for the deployment pipeline."""

  bucket_name: str
  distribution_id: str
  url: str


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - CloudFront origin access identity
  - Private, encrypted S3 bucket readable only by that identity
  - Security headers response policy
  - CloudFront distribution with HTTPS redirect and SPA error fallback
  - (With a domain) ACM certificate in us-east-1 and a Route 53 alias record
  - Stack exports for the bucket name, distribution ID and site URL
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain: SiteDomain | None = None,
    site_sub_domain: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    # Get the stack name for resource prefixing
    stack_name = Stack.of(self).stack_name

    if domain is None and site_sub_domain:
      Annotations.of(self).add_warning_v2(
        "static-site:sub-domain-ignored",
        f"site_sub_domain '{site_sub_domain}' is ignored without a domain name",
      )

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      f"{stack_name}-origin-access-identity",
      comment=f"CloudFront origin access identity for {id}",
    )

    # Content bucket, readable by CloudFront only
    self.bucket = SiteBucket(self, f"{stack_name}-bucket")
    self.bucket.grant_origin_read(self.origin_access_identity)

    self.dns: SiteDns | None = None
    self.certificate: SiteCertificate | None = None
    if domain is not None:
      self.dns = SiteDns(
        self,
        f"{stack_name}-dns",
        zone=domain.zone,
        site_domain=domain.site_domain,
      )
      self.certificate = SiteCertificate(
        self,
        f"{stack_name}-certificate",
        domain_name=domain.site_domain,
        hosted_zone=self.dns.hosted_zone,
      )

    self.headers = SecurityHeadersPolicy(self, f"{stack_name}-security-headers")

    self.distribution = SiteDistribution(
      self,
      f"{stack_name}-distribution",
      bucket=self.bucket.bucket,
      origin_access_identity=self.origin_access_identity,
      response_headers_policy=self.headers.policy,
      certificate=self.certificate.certificate if self.certificate else None,
      domain_names=[domain.site_domain] if domain else [],
    )

    distribution = self.distribution.distribution
    if self.dns is not None:
      self.dns.create_alias_record(distribution)
      url = f"https://{self.dns.site_domain}"
    else:
      url = f"https://{distribution.distribution_domain_name}"

    self.exports = SiteExports(
      bucket_name=self.bucket.bucket.bucket_name,
      distribution_id=distribution.distribution_id,
      url=url,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.exports.bucket_name,
      description="S3 bucket name",
      export_name=f"{stack_name}-bucket-name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.exports.distribution_id,
      description="CloudFront distribution ID",
      export_name=f"{stack_name}-distribution-id",
    )
    CfnOutput(
      self,
      "SiteUrl",
      value=self.exports.url,
      description="Public site URL",
      export_name=f"{stack_name}-site-url",
    )
