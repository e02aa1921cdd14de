import logging

from s3_put.archive import ArchiveFileFetcher
from s3_put.errors import UnresolvedArtifact
from s3_put.locator import get_s3_location_for_input_artifact
from s3_put.models import Job
from s3_put.references import parse_artifact_path
from s3_put.store import ObjectStore


logger = logging.getLogger("s3put.copier")


class ResourceCopier:
    def __init__(self, fetcher: ArchiveFileFetcher, destination: ObjectStore) -> None:
        self.fetcher = fetcher
        self.destination = destination

    def copy(self, artifact_path: str, destination_bucket: str, destination_key: str, job: Job) -> None:
        ref = parse_artifact_path(artifact_path)

        location = get_s3_location_for_input_artifact(ref.artifact_name, job)
        if location is None:
            raise UnresolvedArtifact(
                f"Invalid resource for key '{artifact_path}': artifact '{ref.artifact_name}' is not an input artifact"
            )

        body = self.fetcher.fetch(location, ref.file_name)
        self.destination.put(destination_bucket, destination_key, body)
        logger.info(
            "resource.copied artifact=%s file=%s bucket=%s key=%s size=%s",
            ref.artifact_name,
            ref.file_name,
            destination_bucket,
            destination_key,
            len(body),
        )


def copy_artifact_resource_to_s3(
    artifact_path: str,
    destination_bucket: str,
    destination_key: str,
    job: Job,
    fetcher: ArchiveFileFetcher,
    destination: ObjectStore,
) -> None:
    ResourceCopier(fetcher, destination).copy(artifact_path, destination_bucket, destination_key, job)
