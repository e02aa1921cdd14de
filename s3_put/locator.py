from typing import Optional

from s3_put.models import Job, StoreLocation


def get_s3_location_for_input_artifact(artifact_name: str, job: Job) -> Optional[StoreLocation]:
    for artifact in job.data.inputArtifacts:
        if artifact.name == artifact_name:
            s3_location = artifact.location.s3Location
            return StoreLocation(bucket=s3_location.bucketName, key=s3_location.objectKey)
    return None
