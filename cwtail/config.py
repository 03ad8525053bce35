import os
import logging

import boto3

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING"),
    format="%(asctime)s | %(levelname)s | %(message)s",
)
log = logging.getLogger("cwtail")

logging.getLogger("botocore").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)

# seconds between shared ticks
REFRESH_RATE = 3.0


def aws_region() -> str:
    # resolved per call: a broken profile must surface as a startup error, not at import
    return os.getenv("AWS_REGION") or boto3.session.Session().region_name or "us-east-1"


def new_logs_client():
    """
    CloudWatch Logs client on the default credential chain. No retry or timeout overrides.
    """
    region = aws_region()
    log.debug(f"[tail] creating logs client region={region}")
    return boto3.client("logs", region_name=region)
