from __future__ import annotations

import copy
import io
import json
import zipfile

from s3_put.errors import NotFound, WriteFailed
from s3_put.models import Job


BUILD_JSON = b'{\n\t"version": "1"\n}'
TEMPLATE_YAML = b"AWSTemplateFormatVersion: '2010-09-09'\nResources: {}\n"

SAMPLE_JOB = {
    "id": "11111111-abcd-1111-abcd-111111abcdef",
    "accountId": "111111111111",
    "data": {
        "actionConfiguration": {
            "configuration": {
                "FunctionName": "MyLambdaFunctionForAWSCodePipeline",
                "UserParameters": json.dumps(
                    {
                        "ObjectPath": "ArtifactName::template.yaml",
                        "BucketName": "MyBucket",
                        "ObjectKey": "templates/template-${ArtifactName::build.json::version}.yaml",
                    }
                ),
            }
        },
        "inputArtifacts": [
            {
                "location": {
                    "s3Location": {"bucketName": "inputBucket", "objectKey": "inputArtifact.zip"},
                    "type": "S3",
                },
                "revision": "1",
                "name": "ArtifactName",
            }
        ],
        "outputArtifacts": [
            {
                "location": {
                    "s3Location": {"bucketName": "outputBucket", "objectKey": "outputArtifact.zip"},
                    "type": "S3",
                },
                "revision": "1",
                "name": "OutputName",
            }
        ],
        "artifactCredentials": {
            "secretAccessKey": "secret-access-key-value",
            "sessionToken": "session-token-value",
            "accessKeyId": "ASIAEXAMPLEEXAMPLE00",
        },
        "continuationToken": "A continuation token if continuing job",
    },
}


def build_zip(members: dict[str, bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, body in members.items():
            archive.writestr(name, body)
    return buffer.getvalue()


def sample_job_payload(user_parameters: dict | str | None = None) -> dict:
    payload = copy.deepcopy(SAMPLE_JOB)
    if user_parameters is not None:
        if not isinstance(user_parameters, str):
            user_parameters = json.dumps(user_parameters)
        payload["data"]["actionConfiguration"]["configuration"]["UserParameters"] = user_parameters
    return payload


def sample_job(user_parameters: dict | str | None = None) -> Job:
    return Job(**sample_job_payload(user_parameters))


class FakeObjectStore:
    def __init__(self, objects: dict[tuple[str, str], bytes] | None = None) -> None:
        self.objects: dict[tuple[str, str], bytes] = dict(objects or {})
        self.gets: list[tuple[str, str]] = []
        self.puts: list[dict] = []
        self._fail_puts = False

    def fail_puts(self) -> None:
        self._fail_puts = True

    def get(self, bucket: str, key: str) -> bytes:
        self.gets.append((bucket, key))
        if (bucket, key) not in self.objects:
            raise NotFound(f"Artifact object s3://{bucket}/{key} was not found")
        return self.objects[(bucket, key)]

    def put(self, bucket: str, key: str, body: bytes) -> None:
        if self._fail_puts:
            raise WriteFailed(f"Unable to write object s3://{bucket}/{key}: AccessDenied")
        self.puts.append({"Bucket": bucket, "Key": key, "Body": body})
        self.objects[(bucket, key)] = body


def sample_store(members: dict[str, bytes] | None = None) -> FakeObjectStore:
    if members is None:
        members = {"build.json": BUILD_JSON, "template.yaml": TEMPLATE_YAML}
    return FakeObjectStore({("inputBucket", "inputArtifact.zip"): build_zip(members)})


class FakeReporter:
    def __init__(self) -> None:
        self.successes: list[str] = []
        self.failures: list[dict] = []

    def report_success(self, job_id: str) -> None:
        self.successes.append(job_id)

    def report_failure(self, job_id: str, message: str, execution_id: str) -> None:
        self.failures.append({"jobId": job_id, "message": message, "externalExecutionId": execution_id})


class FakeContext:
    def __init__(self, aws_request_id: str = "req-123") -> None:
        self.aws_request_id = aws_request_id
