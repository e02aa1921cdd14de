import re
from typing import Optional

from s3_put.errors import InvalidReference
from s3_put.models import ArtifactRef, Placeholder


PLACEHOLDER_PATTERN = re.compile(r"\$\{(?P<artifact>[^:}]+)::(?P<file>[^:}]+)(?:::(?P<field>[^}]+))?\}")
ARTIFACT_PATH_PATTERN = re.compile(r"^(?P<artifact>[^:]+)::(?P<file>.+)\Z")


def find_placeholder(template: str) -> Optional[Placeholder]:
    """Return the first ``${Artifact::file[::field]}`` token in ``template``.

    Later tokens are not inspected; callers resolve at most one per string.
    """
    match = PLACEHOLDER_PATTERN.search(template)
    if not match:
        return None
    return Placeholder(
        token=match.group(0),
        start=match.start(),
        end=match.end(),
        artifact_name=match.group("artifact"),
        file_name=match.group("file"),
        field_name=match.group("field"),
    )


def parse_artifact_path(value: str) -> ArtifactRef:
    match = ARTIFACT_PATH_PATTERN.match(value or "")
    if not match:
        raise InvalidReference(f"Unable to resolve resource artifact location from '{value}'")
    return ArtifactRef(artifact_name=match.group("artifact"), file_name=match.group("file"))
