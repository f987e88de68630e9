"""CloudFront distribution for the static website."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

# CloudFront's third policy, allow-all, would serve plain HTTP.
VIEWER_PROTOCOL_POLICIES = {
  "redirect-to-https": cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
  "https-only": cloudfront.ViewerProtocolPolicy.HTTPS_ONLY,
}


class WebsiteDistribution(Construct):
  """CloudFront distribution with a private S3 bucket origin."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    default_root_object: str = "index.html",
    viewer_protocol_policy: str = "redirect-to-https",
  ) -> None:
    super().__init__(scope, id)

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_control(bucket),
        viewer_protocol_policy=VIEWER_PROTOCOL_POLICIES[viewer_protocol_policy],
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
      ),
      default_root_object=default_root_object,
    )
