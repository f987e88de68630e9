"""CDK constructs for the static website."""

from .content import WebsiteContent
from .distribution import WebsiteDistribution
from .static_site import StaticWebsiteConstruct
from .storage import WebsiteBucket

__all__ = [
  "StaticWebsiteConstruct",
  "WebsiteBucket",
  "WebsiteContent",
  "WebsiteDistribution",
]
