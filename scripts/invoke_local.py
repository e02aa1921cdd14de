#!/usr/bin/env python3
"""Run the S3 put action handler against a CodePipeline event stored on disk.

The handler uses real AWS clients built from the usual boto3 credential chain,
so the event's artifact locations and destination bucket must exist.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import uuid
from dataclasses import dataclass, field
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from s3_put.config import Settings  # noqa: E402
from s3_put.errors import S3PutError  # noqa: E402
from s3_put.handler import build_handler  # noqa: E402


@dataclass
class LocalContext:
    aws_request_id: str = field(default_factory=lambda: f"local-{uuid.uuid4()}")
    function_name: str = "s3-put-local"


def load_event(path: Path) -> dict:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object")
    if "CodePipeline.job" not in payload and "data" in payload:
        payload = {"CodePipeline.job": payload}
    return payload


def main() -> int:
    parser = argparse.ArgumentParser(description="Invoke the S3 put pipeline action locally.")
    parser.add_argument("event", type=Path, help="Path to a CodePipeline event (or bare job) JSON file")
    parser.add_argument("--request-id", default=None, help="Execution id reported on failure")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        event = load_event(args.event)
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    context = LocalContext()
    if args.request_id:
        context.aws_request_id = args.request_id

    try:
        result = build_handler(Settings()).handle(event, context)
    except S3PutError as exc:
        print(f"ERROR: {exc.code}: {exc.message}", file=sys.stderr)
        return 2
    print(json.dumps(result, indent=2))
    return 0 if result.get("status") == "succeeded" else 1


if __name__ == "__main__":
    raise SystemExit(main())
