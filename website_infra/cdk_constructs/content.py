"""Upload of the local website files into the bucket."""

import logging
from pathlib import Path

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

logger: logging.Logger = logging.getLogger(__name__)


class WebsiteContent(Construct):
  """Deploys a local asset directory to the website bucket.

  The directory is packaged as a CDK asset at synth time and copied into
  the bucket on every deployment. Objects no longer in the directory are
  pruned, so the bucket always mirrors the latest bundle.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    asset_path: Path | str,
  ) -> None:
    super().__init__(scope, id)

    asset_path = Path(asset_path)
    if not asset_path.is_dir():
      raise FileNotFoundError(f"Website asset directory not found: {asset_path}")

    logger.debug("declaring_website_content asset_path=%s", asset_path)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(asset_path))],
      destination_bucket=bucket,
    )
