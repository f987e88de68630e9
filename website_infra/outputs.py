"""Read the deployed website URL back from CloudFormation."""

import logging
from typing import Any

import boto3

logger: logging.Logger = logging.getLogger(__name__)

URL_OUTPUT_KEY = "CloudFrontURL"


class OutputNotFoundError(LookupError):
  """Raised when a deployed stack has no website URL output."""


def get_site_url(
  stack_name: str,
  region: str = "ap-southeast-2",
  client: Any | None = None,
) -> str:
  """Return the CloudFront URL published by a deployed stack.

  Args:
    stack_name: The CloudFormation stack name (e.g., 'CdkWorkshopStack')
    region: AWS region the stack was deployed to
    client: Optional CloudFormation client, created with boto3 when omitted

  Returns:
    The ``https://`` URL of the distribution
  """
  if client is None:
    client = boto3.client("cloudformation", region_name=region)

  response = client.describe_stacks(StackName=stack_name)
  for stack in response["Stacks"]:
    for output in stack.get("Outputs", []):
      if output["OutputKey"] == URL_OUTPUT_KEY:
        logger.debug(
          "site_url_found stack_name=%s url=%s", stack_name, output["OutputValue"]
        )
        return str(output["OutputValue"])

  raise OutputNotFoundError(f"Stack {stack_name} has no {URL_OUTPUT_KEY} output")
