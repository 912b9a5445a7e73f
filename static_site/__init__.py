"""Static website infrastructure: S3, CloudFront, ACM and Route 53."""
