import json

from pydantic import ValidationError

from s3_put.errors import InvalidConfiguration
from s3_put.models import Job, PutConfiguration


USER_PARAMETERS = "UserParameters"


def get_s3_put_configuration_from_job(job: Job) -> PutConfiguration:
    raw = job.data.actionConfiguration.configuration.get(USER_PARAMETERS)
    if not raw:
        raise InvalidConfiguration(f"Action configuration is missing {USER_PARAMETERS}")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{USER_PARAMETERS} is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise InvalidConfiguration(f"{USER_PARAMETERS} must be a JSON object")
    try:
        return PutConfiguration(**parsed)
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        raise InvalidConfiguration(f"{USER_PARAMETERS} has missing or invalid fields: {', '.join(fields)}") from exc
