"""Resolution of ``${Artifact::file[::field]}`` placeholders in configuration strings."""

import json
import logging
from typing import Any

from s3_put.archive import ArchiveFileFetcher
from s3_put.errors import MissingField, UnresolvedArtifact, UnresolvedResource
from s3_put.locator import get_s3_location_for_input_artifact
from s3_put.models import Job
from s3_put.references import find_placeholder


logger = logging.getLogger("s3put.resolver")


class PlaceholderResolver:
    def __init__(self, fetcher: ArchiveFileFetcher) -> None:
        self.fetcher = fetcher

    def resolve(self, template: str, job: Job) -> str:
        """Substitute the first placeholder in ``template`` with its resolved value.

        The file body replaces the token as UTF-8 text, or, when a field is
        named, the file is decoded as a JSON object and that field's value is
        used. A field whose value is ``0``, ``""``, ``false`` or ``null``
        counts as missing; empty arrays and objects do not. Strings without a placeholder come back unchanged.
        """
        placeholder = find_placeholder(template)
        if placeholder is None:
            return template

        location = get_s3_location_for_input_artifact(placeholder.artifact_name, job)
        if location is None:
            raise UnresolvedArtifact(
                f"Invalid resource for key '{template}': artifact '{placeholder.artifact_name}' is not an input artifact"
            )

        body = self.fetcher.fetch(location, placeholder.file_name)

        if placeholder.field_name is None:
            value = _decode_text(body, placeholder.file_name)
        else:
            document = _decode_json_object(body, placeholder.file_name)
            raw = document.get(placeholder.field_name)
            if _is_empty(raw):
                raise MissingField(
                    f"Invalid resource for key '{template}': field '{placeholder.field_name}' "
                    f"is missing or empty in '{placeholder.file_name}'"
                )
            value = _stringify(raw)

        logger.info(
            "placeholder.resolved artifact=%s file=%s field=%s",
            placeholder.artifact_name,
            placeholder.file_name,
            placeholder.field_name or "-",
        )
        return template[: placeholder.start] + value + template[placeholder.end :]


def _decode_text(body: bytes, file_name: str) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnresolvedResource(f"File '{file_name}' is not valid UTF-8 text") from exc


def _decode_json_object(body: bytes, file_name: str) -> dict:
    try:
        document = json.loads(_decode_text(body, file_name))
    except json.JSONDecodeError as exc:
        raise UnresolvedResource(f"File '{file_name}' is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise UnresolvedResource(f"File '{file_name}' does not contain a JSON object")
    return document


def _is_empty(value: Any) -> bool:
    # Empty lists and objects are values, not gaps.
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def _stringify(value: Any) -> str:
    """Render a JSON value the way a JavaScript string conversion would.

    ``2.0`` becomes ``2``, ``true`` stays ``true``, arrays are joined with
    commas (nulls inside them render empty) and objects render as
    ``[object Object]``.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value:
            return "NaN"
        if value in (float("inf"), float("-inf")):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, list):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return "[object Object]"


def resolve_object_key(object_key: str, job: Job, fetcher: ArchiveFileFetcher) -> str:
    return PlaceholderResolver(fetcher).resolve(object_key, job)
