"""ACM certificate with DNS validation."""

from aws_cdk import Stack
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

# CloudFront only reads certificates from this region
CERTIFICATE_REGION = "us-east-1"


class SiteCertificate(Construct):
  """DNS-validated certificate for the site domain, issued in us-east-1."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone: route53.IHostedZone,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name

    if Stack.of(self).region == CERTIFICATE_REGION:
      self.certificate: acm.ICertificate = acm.Certificate(
        self,
        "Certificate",
        domain_name=domain_name,
        validation=acm.CertificateValidation.from_dns(hosted_zone),
      )
    else:
      # Requested from us-east-1 by a custom resource in this stack
      self.certificate = acm.DnsValidatedCertificate(
        self,
        "Certificate",
        domain_name=domain_name,
        hosted_zone=hosted_zone,
        region=CERTIFICATE_REGION,
      )
