"""CloudFront distribution for static website."""

from aws_cdk import Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

INDEX_DOCUMENT = "index.html"

# Unknown paths fall back to the index so client-side routing can handle them
SPA_FALLBACK_STATUSES = (403, 404)


class SiteDistribution(Construct):
  """CloudFront distribution serving a private S3 bucket over HTTPS."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    origin_access_identity: cloudfront.IOriginAccessIdentity,
    response_headers_policy: cloudfront.IResponseHeadersPolicy,
    certificate: acm.ICertificate | None = None,
    domain_names: list[str] | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=origin_access_identity,
        ),
        compress=True,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        response_headers_policy=response_headers_policy,
        cache_policy=cloudfront.CachePolicy.CACHING_OPTIMIZED,
      ),
      domain_names=domain_names or [],
      certificate=certificate,
      default_root_object=INDEX_DOCUMENT,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
      price_class=cloudfront.PriceClass.PRICE_CLASS_ALL,
      http_version=cloudfront.HttpVersion.HTTP2,
      enable_ipv6=True,
      # Zero TTL so fixes to the index are served immediately
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=status,
          response_http_status=200,
          response_page_path=f"/{INDEX_DOCUMENT}",
          ttl=Duration.minutes(0),
        )
        for status in SPA_FALLBACK_STATUSES
      ],
    )
