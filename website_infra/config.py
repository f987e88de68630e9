"""Configuration loader for the static website stack."""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

from .cdk_constructs.distribution import VIEWER_PROTOCOL_POLICIES as _DISTRIBUTION_POLICIES

logger: logging.Logger = logging.getLogger(__name__)

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}
BLOCK_PUBLIC_ACCESS_MODES = ("block_acls", "block_all")
VIEWER_PROTOCOL_POLICIES = tuple(_DISTRIBUTION_POLICIES)


class ConfigError(ValueError):
  """Raised when the website configuration is malformed."""


@dataclass
class WebsiteConfig:
  """Configuration for the static website deployment."""

  stack_name: str = "CdkWorkshopStack"
  region: str = "ap-southeast-2"
  account: str | None = None
  asset_dir: str = "website"
  default_root_object: str = "index.html"
  removal_policy: RemovalPolicy = RemovalPolicy.DESTROY
  auto_delete_objects: bool = True
  block_public_access: str = "block_acls"
  viewer_protocol_policy: str = "redirect-to-https"
  tags: dict[str, str] = field(default_factory=dict)

  def __post_init__(self) -> None:
    if self.block_public_access not in BLOCK_PUBLIC_ACCESS_MODES:
      raise ConfigError(
        f"block_public_access must be one of {BLOCK_PUBLIC_ACCESS_MODES}, "
        f"got {self.block_public_access!r}"
      )
    if self.viewer_protocol_policy not in VIEWER_PROTOCOL_POLICIES:
      raise ConfigError(
        f"viewer_protocol_policy must be one of {VIEWER_PROTOCOL_POLICIES}, "
        f"got {self.viewer_protocol_policy!r}"
      )
    # CDK refuses to synthesize auto-delete on a bucket it does not destroy
    if self.auto_delete_objects and self.removal_policy != RemovalPolicy.DESTROY:
      raise ConfigError("auto_delete_objects requires removal_policy: destroy")

  def asset_path(self, base: Path | str = ".") -> Path:
    """Resolve the asset directory against a base directory."""
    return Path(base) / self.asset_dir

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> "WebsiteConfig":
    """Build a config from a mapping of YAML values."""
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
      raise ConfigError(f"Unknown website settings: {', '.join(unknown)}")

    values = dict(data)

    # Convert removal_policy string to enum
    if "removal_policy" in values:
      removal_policy_str = str(values["removal_policy"]).lower()
      if removal_policy_str not in REMOVAL_POLICIES:
        raise ConfigError(f"Unknown removal_policy: {values['removal_policy']!r}")
      values["removal_policy"] = REMOVAL_POLICIES[removal_policy_str]

    if "account" in values and values["account"] is not None:
      # YAML reads a bare account id as an int
      values["account"] = str(values["account"])

    if "tags" in values:
      tags = values["tags"] or {}
      if not isinstance(tags, dict):
        raise ConfigError("tags must be a mapping")
      values["tags"] = {str(k): str(v) for k, v in tags.items()}

    config = cls(**values)
    logger.debug(
      "website_config_loaded stack_name=%s region=%s asset_dir=%s",
      config.stack_name,
      config.region,
      config.asset_dir,
    )
    return config

  @classmethod
  def from_yaml(cls, path: Path | str = "website.yaml") -> "WebsiteConfig":
    """Load configuration from YAML file.

    The file holds an optional ``defaults`` block and a ``website`` block;
    keys in ``website`` win.
    """
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
      raise ConfigError(f"{path}: expected a mapping at the top level")

    defaults = data.get("defaults") or {}
    website = data.get("website") or {}
    if not isinstance(defaults, dict) or not isinstance(website, dict):
      raise ConfigError(f"{path}: 'defaults' and 'website' must be mappings")

    # Merge defaults with website-specific config
    return cls.from_dict({**defaults, **website})

  @classmethod
  def load(cls, path: Path | str = "website.yaml") -> "WebsiteConfig":
    """Load from ``path`` if it exists, otherwise use the built-in defaults."""
    if Path(path).is_file():
      return cls.from_yaml(path)
    logger.debug("website_config_defaults path=%s", path)
    return cls()
