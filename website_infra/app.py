#!/usr/bin/env python3
"""CDK application entry point for the static website."""

import logging
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from website_infra.config import ConfigError, WebsiteConfig
from website_infra.stacks import StaticWebsiteStack

logger: logging.Logger = logging.getLogger(__name__)


def log_level(value: object) -> int:
  """Convert a level name such as ``debug`` or ``INFO`` to a logging level."""
  level = logging.getLevelName(str(value).upper())
  if not isinstance(level, int):
    raise ConfigError(f"Unknown log_level: {value!r}")
  return level


def build_app(app: cdk.App, config: WebsiteConfig) -> StaticWebsiteStack:
  """Declare the website stack on ``app``."""
  logger.info(
    "declaring_stack stack_name=%s region=%s", config.stack_name, config.region
  )
  return StaticWebsiteStack(
    app,
    config.stack_name,
    website_config=config,
    env=cdk.Environment(account=config.account, region=config.region),
    description="Static website served from S3 through CloudFront",
  )


def main(app: cdk.App | None = None) -> StaticWebsiteStack:
  """Create the CDK app and synthesize the website stack."""
  if app is None:
    app = cdk.App()

  logging.basicConfig(
    level=log_level(app.node.try_get_context("log_level") or "INFO"),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
  )

  # Load configuration
  config_path = app.node.try_get_context("config") or "website.yaml"
  config = WebsiteConfig.load(Path(config_path))

  stack = build_app(app, config)

  app.synth()
  return stack


if __name__ == "__main__":
  main()
