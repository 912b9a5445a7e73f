"""Private S3 bucket holding the site content."""

from aws_cdk import RemovalPolicy, Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct


class SiteBucket(Construct):
  """S3 bucket readable only through a CloudFront origin access identity."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    name_suffix: str = "site-bucket",
  ) -> None:
    super().__init__(scope, id)

    stack_name = Stack.of(self).stack_name

    # Bucket names must be lowercase
    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=f"{stack_name}-{name_suffix}".lower(),
      public_read_access=False,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      access_control=s3.BucketAccessControl.PRIVATE,
      object_ownership=s3.ObjectOwnership.BUCKET_OWNER_ENFORCED,
      encryption=s3.BucketEncryption.S3_MANAGED,
      removal_policy=RemovalPolicy.DESTROY,
      auto_delete_objects=True,
    )

  def grant_origin_read(
    self, identity: cloudfront.OriginAccessIdentity
  ) -> iam.PolicyStatement:
    """Allow the origin access identity to read every object."""
    statement = iam.PolicyStatement(
      actions=["s3:GetObject"],
      resources=[self.bucket.arn_for_objects("*")],
      principals=[
        iam.CanonicalUserPrincipal(
          identity.cloud_front_origin_access_identity_s3_canonical_user_id
        )
      ],
    )
    self.bucket.add_to_resource_policy(statement)
    return statement
