#!/usr/bin/env python3
"""Print the exports of a deployed static site stack."""

import argparse
import json
import sys
from typing import Any

import boto3  # type: ignore[import-not-found]

# Export names are "<stack>-<suffix>"
EXPORT_SUFFIXES = ("bucket-name", "distribution-id", "site-url")


def get_site_outputs(
  stack_name: str,
  region: str = "us-east-1",
  client: Any = None,
) -> dict[str, str]:
  """Read a site stack's CloudFormation exports.

  Args:
    stack_name: The CDK stack name (e.g., 'acme')
    region: AWS region
    client: CloudFormation client (created for ``region`` if omitted)

  Returns:
    Dictionary keyed by export suffix: bucket-name, distribution-id, site-url
  """
  cloudformation = client or boto3.client("cloudformation", region_name=region)
  wanted = {f"{stack_name}-{suffix}": suffix for suffix in EXPORT_SUFFIXES}

  outputs: dict[str, str] = {}
  paginator = cloudformation.get_paginator("list_exports")
  for page in paginator.paginate():
    for export in page.get("Exports", []):
      if export["Name"] in wanted:
        outputs[wanted[export["Name"]]] = export["Value"]

  return outputs


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the exports of a static site stack"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., acme)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json", "export"],
    default="env",
    help="Output format (default: env)",
  )

  args = parser.parse_args()

  try:
    outputs = get_site_outputs(args.stack_name, args.region)
  except Exception as e:
    print(f"Error retrieving outputs: {e}", file=sys.stderr)
    sys.exit(1)

  if not outputs:
    print(f"No exports found for stack {args.stack_name}", file=sys.stderr)
    sys.exit(1)

  # env-style keys: bucket-name -> BUCKET_NAME
  variables = {key.upper().replace("-", "_"): value for key, value in outputs.items()}

  if args.format == "json":
    print(json.dumps(outputs, indent=2))
  elif args.format == "export":
    for key, value in variables.items():
      print(f"export {key}={value}")
  else:  # env format
    for key, value in variables.items():
      print(f"{key}={value}")


if __name__ == "__main__":
  main()
