import logging

import boto3

from s3_put.config import Settings


FAILURE_TYPE = "JobFailed"

logger = logging.getLogger("s3put.reporter")


class JobReporter:
    def report_success(self, job_id: str) -> None:
        raise NotImplementedError

    def report_failure(self, job_id: str, message: str, execution_id: str) -> None:
        raise NotImplementedError


class CodePipelineReporter(JobReporter):
    def __init__(self, client, max_message_chars: int = 5000) -> None:
        self._client = client
        self.max_message_chars = max_message_chars

    def report_success(self, job_id: str) -> None:
        self._client.put_job_success_result(jobId=job_id)
        logger.info("job.success_reported job_id=%s", job_id)

    def report_failure(self, job_id: str, message: str, execution_id: str) -> None:
        details = {
            "type": FAILURE_TYPE,
            "message": _truncate(message, self.max_message_chars),
        }
        if execution_id:
            details["externalExecutionId"] = execution_id
        self._client.put_job_failure_result(jobId=job_id, failureDetails=details)
        logger.info("job.failure_reported job_id=%s execution_id=%s", job_id, execution_id or "-")


def _truncate(message: str, limit: int) -> str:
    text = message or FAILURE_TYPE
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def build_reporter(settings: Settings) -> CodePipelineReporter:
    kwargs = {}
    if settings.aws_region:
        kwargs["region_name"] = settings.aws_region
    return CodePipelineReporter(
        boto3.client("codepipeline", **kwargs),
        max_message_chars=settings.failure_message_max_chars,
    )
