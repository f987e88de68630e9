"""S3 bucket holding the static website files."""

import logging

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct

logger: logging.Logger = logging.getLogger(__name__)


def _block_public_access(mode: str) -> s3.BlockPublicAccess:
  """Map a config mode name to the matching public-access block."""
  if mode == "block_all":
    return s3.BlockPublicAccess.BLOCK_ALL
  # Block ACL-based public access only
  return s3.BlockPublicAccess.BLOCK_ACLS_ONLY


class WebsiteBucket(Construct):
  """Private S3 bucket served through CloudFront."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
    auto_delete_objects: bool = True,
    block_public_access: str = "block_acls",
  ) -> None:
    super().__init__(scope, id)

    logger.debug(
      "declaring_website_bucket id=%s block_public_access=%s", id, block_public_access
    )

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      removal_policy=removal_policy,
      auto_delete_objects=auto_delete_objects,
      block_public_access=_block_public_access(block_public_access),
    )
