"""Composite construct for the complete static website."""

from pathlib import Path

from aws_cdk import RemovalPolicy
from constructs import Construct

from .content import WebsiteContent
from .distribution import WebsiteDistribution
from .storage import WebsiteBucket


class StaticWebsiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - S3 bucket for static content
  - Deployment of the local asset directory into the bucket
  - CloudFront distribution serving the bucket over HTTPS
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    asset_path: Path | str,
    default_root_object: str = "index.html",
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
    auto_delete_objects: bool = True,
    block_public_access: str = "block_acls",
    viewer_protocol_policy: str = "redirect-to-https",
  ) -> None:
    super().__init__(scope, id)

    self.bucket = WebsiteBucket(
      self,
      "StaticWebsiteBucket",
      removal_policy=removal_policy,
      auto_delete_objects=auto_delete_objects,
      block_public_access=block_public_access,
    )

    self.content = WebsiteContent(
      self,
      "DeployWebsite",
      bucket=self.bucket.bucket,
      asset_path=asset_path,
    )

    self.distribution = WebsiteDistribution(
      self,
      "CloudFrontDistribution",
      bucket=self.bucket.bucket,
      default_root_object=default_root_object,
      viewer_protocol_policy=viewer_protocol_policy,
    )
