"""CDK stack for the static website."""

from pathlib import Path
from typing import Any

import aws_cdk as cdk
from constructs import Construct

from ..cdk_constructs import StaticWebsiteConstruct
from ..config import WebsiteConfig


class StaticWebsiteStack(cdk.Stack):
  """Stack serving a local directory of files from S3 through CloudFront."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_config: WebsiteConfig,
    asset_path: Path | str | None = None,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    if asset_path is None:
      asset_path = website_config.asset_path()

    self.site = StaticWebsiteConstruct(
      self,
      "Site",
      asset_path=asset_path,
      default_root_object=website_config.default_root_object,
      removal_policy=website_config.removal_policy,
      auto_delete_objects=website_config.auto_delete_objects,
      block_public_access=website_config.block_public_access,
      viewer_protocol_policy=website_config.viewer_protocol_policy,
    )

    self.url = (
      f"https://{self.site.distribution.distribution.distribution_domain_name}"
    )
    cdk.CfnOutput(
      self,
      "CloudFrontURL",
      value=self.url,
      description="The CloudFront distribution URL",
    )

    for key, value in website_config.tags.items():
      cdk.Tags.of(self).add(key, value)
