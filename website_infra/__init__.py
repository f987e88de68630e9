"""AWS CDK infrastructure for an S3 + CloudFront static website."""
