"""CDK stacks for the static website."""

from .website_stack import StaticWebsiteStack

__all__ = ["StaticWebsiteStack"]
