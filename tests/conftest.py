"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="ap-southeast-2"))


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
  """Create a website directory containing an index page."""
  site = tmp_path / "website"
  site.mkdir()
  (site / "index.html").write_text("<h1>Hello</h1>\n")
  return site
