import json
import logging
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from s3_put.archive import ArchiveFileFetcher
from s3_put.config import Settings
from s3_put.copier import ResourceCopier
from s3_put.errors import InvalidConfiguration, S3PutError
from s3_put.job_config import get_s3_put_configuration_from_job
from s3_put.models import ArtifactCredentials, Job
from s3_put.observability import job_scope, log_event
from s3_put.redaction import redact_event
from s3_put.reporter import JobReporter, build_reporter
from s3_put.resolver import PlaceholderResolver
from s3_put.store import ObjectStore, build_object_store


JOB_EVENT_KEY = "CodePipeline.job"

StoreFactory = Callable[[Optional[ArtifactCredentials]], ObjectStore]

logger = logging.getLogger("s3put.handler")


class JobHandler:
    def __init__(self, settings: Settings, store_factory: StoreFactory, reporter: JobReporter) -> None:
        self.settings = settings
        self.store_factory = store_factory
        self.reporter = reporter
        self._default_store: Optional[ObjectStore] = None

    @property
    def default_store(self) -> ObjectStore:
        if self._default_store is None:
            self._default_store = self.store_factory(None)
        return self._default_store

    def handle(self, event: Dict[str, Any], context) -> Dict[str, Any]:
        if self.settings.log_events:
            logger.info("event %s", json.dumps(redact_event(event), indent=2, default=str))

        raw_job = (event or {}).get(JOB_EVENT_KEY)
        if not isinstance(raw_job, dict):
            raise InvalidConfiguration(f"Event does not contain a {JOB_EVENT_KEY} object")
        job_id = raw_job.get("id") or raw_job.get("jobId")
        if not job_id:
            raise InvalidConfiguration(f"{JOB_EVENT_KEY} has no job id to report against")

        execution_id = str(getattr(context, "aws_request_id", "") or "")
        with job_scope(str(job_id), execution_id):
            try:
                try:
                    job = Job(**raw_job)
                except ValidationError as exc:
                    raise InvalidConfiguration(f"Malformed {JOB_EVENT_KEY}: {exc.error_count()} validation error(s)") from exc
                destination = self.run(job)
            except S3PutError as exc:
                log_event("job_failed", code=exc.code, error=exc.message)
                self.reporter.report_failure(str(job_id), exc.message, execution_id)
                return {"jobId": job_id, "status": "failed", "code": exc.code, "message": exc.message}
            except Exception as exc:
                logger.exception("job.unexpected_error job_id=%s", job_id)
                self.reporter.report_failure(str(job_id), str(exc) or type(exc).__name__, execution_id)
                raise
            self.reporter.report_success(str(job_id))
            log_event("job_succeeded", bucket=destination[0], key=destination[1])
            return {"jobId": job_id, "status": "succeeded", "bucket": destination[0], "key": destination[1]}

    def run(self, job: Job) -> tuple[str, str]:
        """Resolve the destination key, then copy the source file to it."""
        configuration = get_s3_put_configuration_from_job(job)
        fetcher = ArchiveFileFetcher(self._source_store(job))

        object_key = PlaceholderResolver(fetcher).resolve(configuration.ObjectKey, job)
        log_event("object_key_resolved", template=configuration.ObjectKey, key=object_key)

        ResourceCopier(fetcher, self.default_store).copy(
            configuration.ObjectPath,
            configuration.BucketName,
            object_key,
            job,
        )
        return configuration.BucketName, object_key

    def _source_store(self, job: Job) -> ObjectStore:
        credentials = job.data.artifactCredentials
        if self.settings.use_artifact_credentials and credentials is not None and credentials.accessKeyId:
            return self.store_factory(credentials)
        return self.default_store


def build_handler(settings: Settings) -> JobHandler:
    return JobHandler(
        settings,
        store_factory=lambda credentials: build_object_store(settings, credentials),
        reporter=build_reporter(settings),
    )
