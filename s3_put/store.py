import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from s3_put.config import Settings
from s3_put.errors import NotFound, UnresolvedResource, WriteFailed
from s3_put.models import ArtifactCredentials


_NOT_FOUND_CODES = {"NoSuchKey", "NoSuchBucket", "NotFound", "404"}

logger = logging.getLogger("s3put.store")


class ObjectStore:
    def get(self, bucket: str, key: str) -> bytes:
        raise NotImplementedError

    def put(self, bucket: str, key: str, body: bytes) -> None:
        raise NotImplementedError


class S3ObjectStore(ObjectStore):
    def __init__(self, client) -> None:
        self._client = client

    def get(self, bucket: str, key: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            body = response["Body"].read()
        except ClientError as exc:
            code = _error_code(exc)
            logger.warning("s3.get failed bucket=%s key=%s code=%s", bucket, key, code)
            if code in _NOT_FOUND_CODES:
                raise NotFound(f"Artifact object s3://{bucket}/{key} was not found") from exc
            raise UnresolvedResource(f"Unable to read artifact object s3://{bucket}/{key}: {code}") from exc
        except BotoCoreError as exc:
            logger.warning("s3.get failed bucket=%s key=%s error=%s", bucket, key, exc)
            raise UnresolvedResource(f"Unable to read artifact object s3://{bucket}/{key}: {exc}") from exc
        logger.debug("s3.get bucket=%s key=%s size=%s", bucket, key, len(body))
        return body

    def put(self, bucket: str, key: str, body: bytes) -> None:
        try:
            self._client.put_object(Bucket=bucket, Key=key, Body=body)
        except ClientError as exc:
            code = _error_code(exc)
            logger.warning("s3.put failed bucket=%s key=%s code=%s", bucket, key, code)
            raise WriteFailed(f"Unable to write object s3://{bucket}/{key}: {code}") from exc
        except BotoCoreError as exc:
            logger.warning("s3.put failed bucket=%s key=%s error=%s", bucket, key, exc)
            raise WriteFailed(f"Unable to write object s3://{bucket}/{key}: {exc}") from exc
        logger.debug("s3.put bucket=%s key=%s size=%s", bucket, key, len(body))


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", "Unknown"))


def build_object_store(settings: Settings, credentials: Optional[ArtifactCredentials] = None) -> S3ObjectStore:
    kwargs = {}
    if settings.aws_region:
        kwargs["region_name"] = settings.aws_region
    if settings.s3_endpoint_url:
        kwargs["endpoint_url"] = settings.s3_endpoint_url
    if credentials is not None:
        kwargs["aws_access_key_id"] = credentials.accessKeyId
        kwargs["aws_secret_access_key"] = credentials.secretAccessKey
        if credentials.sessionToken:
            kwargs["aws_session_token"] = credentials.sessionToken
    return S3ObjectStore(boto3.client("s3", **kwargs))
