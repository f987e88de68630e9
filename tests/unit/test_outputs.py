"""Tests for reading the website URL back from CloudFormation."""

import json
import sys
from pathlib import Path
from typing import Any

import pytest
from botocore.exceptions import ClientError

from website_infra.outputs import OutputNotFoundError, get_site_url

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

import site_url


class MockCloudFormationClient:
  """Mock CloudFormation client for testing."""

  def __init__(self, outputs: list[dict[str, str]] | None = None) -> None:
    self.outputs = outputs
    self.calls: list[str] = []

  def describe_stacks(self, StackName: str) -> dict[str, Any]:
    self.calls.append(StackName)
    stack: dict[str, Any] = {"StackName": StackName}
    if self.outputs is not None:
      stack["Outputs"] = self.outputs
    return {"Stacks": [stack]}


class TestGetSiteUrl:
  """Tests for get_site_url."""

  def test_returns_url_output(self) -> None:
    client = MockCloudFormationClient(
      [
        {"OutputKey": "Other", "OutputValue": "x"},
        {"OutputKey": "CloudFrontURL", "OutputValue": "https://d111.cloudfront.net"},
      ]
    )

    url = get_site_url("CdkWorkshopStack", client=client)

    assert url == "https://d111.cloudfront.net"
    assert client.calls == ["CdkWorkshopStack"]

  def test_missing_output(self) -> None:
    client = MockCloudFormationClient([{"OutputKey": "Other", "OutputValue": "x"}])

    with pytest.raises(OutputNotFoundError, match="CloudFrontURL"):
      get_site_url("CdkWorkshopStack", client=client)

  def test_stack_without_outputs(self) -> None:
    with pytest.raises(OutputNotFoundError):
      get_site_url("CdkWorkshopStack", client=MockCloudFormationClient())


class TestSiteUrlScript:
  """Tests for the site_url command line script."""

  def test_prints_url(
    self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
  ) -> None:
    monkeypatch.setattr(
      site_url, "get_site_url", lambda name, region: "https://d111.cloudfront.net"
    )

    assert site_url.main(["MyStack"]) == 0
    assert capsys.readouterr().out == "https://d111.cloudfront.net\n"

  def test_json_format(
    self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
  ) -> None:
    monkeypatch.setattr(
      site_url, "get_site_url", lambda name, region: "https://d111.cloudfront.net"
    )

    assert site_url.main(["MyStack", "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == {
      "stack_name": "MyStack",
      "url": "https://d111.cloudfront.net",
    }

  def test_error_exit_status(
    self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
  ) -> None:
    def missing(name: str, region: str) -> str:
      raise OutputNotFoundError("no output")

    monkeypatch.setattr(site_url, "get_site_url", missing)

    assert site_url.main([]) == 1
    assert "no output" in capsys.readouterr().err

  def test_client_error_exit_status(
    self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
  ) -> None:
    def no_stack(name: str, region: str) -> str:
      raise ClientError(
        {
          "Error": {
            "Code": "ValidationError",
            "Message": f"Stack with id {name} does not exist",
          }
        },
        "DescribeStacks",
      )

    monkeypatch.setattr(site_url, "get_site_url", no_stack)

    assert site_url.main(["MissingStack"]) == 1
    err = capsys.readouterr().err
    assert "Error retrieving site URL" in err
    assert "Stack with id MissingStack does not exist" in err
