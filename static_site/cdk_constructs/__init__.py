"""CDK constructs for static website infrastructure."""

from .certificate import CERTIFICATE_REGION, SiteCertificate
from .distribution import SiteDistribution
from .dns import SiteDns
from .headers import SecurityHeadersPolicy
from .static_site import SiteExports, StaticSiteConstruct
from .storage import SiteBucket

__all__ = [
  "CERTIFICATE_REGION",
  "SecurityHeadersPolicy",
  "SiteBucket",
  "SiteCertificate",
  "SiteDistribution",
  "SiteDns",
  "SiteExports",
  "StaticSiteConstruct",
]
