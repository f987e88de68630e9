#!/usr/bin/env python3
"""Print the CloudFront URL of a deployed static website stack."""

import argparse
import json
import sys
from pathlib import Path

from botocore.exceptions import BotoCoreError, ClientError

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from website_infra.outputs import OutputNotFoundError, get_site_url


def main(argv: list[str] | None = None) -> int:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the URL of a deployed static website"
  )
  parser.add_argument(
    "stack_name",
    nargs="?",
    default="CdkWorkshopStack",
    help="CloudFormation stack name (default: CdkWorkshopStack)",
  )
  parser.add_argument(
    "--region",
    default="ap-southeast-2",
    help="AWS region (default: ap-southeast-2)",
  )
  parser.add_argument(
    "--format",
    choices=["text", "json"],
    default="text",
    help="Output format (default: text)",
  )

  args = parser.parse_args(argv)

  try:
    url = get_site_url(args.stack_name, args.region)
  except (BotoCoreError, ClientError, OutputNotFoundError) as e:
    print(f"Error retrieving site URL: {e}", file=sys.stderr)
    return 1

  if args.format == "json":
    print(json.dumps({"stack_name": args.stack_name, "url": url}, indent=2))
  else:
    print(url)
  return 0


if __name__ == "__main__":
  sys.exit(main())
