from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, Field


@dataclass(frozen=True)
class StoreLocation:
    bucket: str
    key: str


@dataclass(frozen=True)
class ArtifactRef:
    artifact_name: str
    file_name: str


@dataclass(frozen=True)
class Placeholder:
    token: str
    start: int
    end: int
    artifact_name: str
    file_name: str
    field_name: Optional[str] = None


class S3Location(BaseModel):
    bucketName: str
    objectKey: str


class ArtifactLocation(BaseModel):
    type: Optional[str] = None
    s3Location: S3Location


class Artifact(BaseModel):
    name: str
    revision: Optional[str] = None
    location: ArtifactLocation


class ArtifactCredentials(BaseModel):
    accessKeyId: str
    secretAccessKey: str
    sessionToken: Optional[str] = None


class ActionConfiguration(BaseModel):
    configuration: Dict[str, str] = {}


class JobData(BaseModel):
    actionConfiguration: ActionConfiguration
    inputArtifacts: List[Artifact] = []
    outputArtifacts: List[Artifact] = []
    artifactCredentials: Optional[ArtifactCredentials] = None
    continuationToken: Optional[str] = None


class Job(BaseModel):
    id: str = Field(..., validation_alias=AliasChoices("id", "jobId"))
    accountId: Optional[str] = None
    data: JobData


class PutConfiguration(BaseModel):
    ObjectPath: str
    BucketName: str
    ObjectKey: str
