import os
from typing import Callable, Optional


class Settings:
    def __init__(self) -> None:
        self.log_level = self._get("S3PUT_LOG_LEVEL", "INFO", str).upper()
        self.log_events = self._as_bool(self._get("S3PUT_LOG_EVENTS", "true", str))
        self.aws_region = self._get("S3PUT_AWS_REGION", "", str) or None
        self.s3_endpoint_url = self._get("S3PUT_S3_ENDPOINT_URL", "", str) or None
        self.use_artifact_credentials = self._as_bool(self._get("S3PUT_USE_ARTIFACT_CREDENTIALS", "0", str))
        self.failure_message_max_chars = self._get("S3PUT_FAILURE_MESSAGE_MAX_CHARS", 5000, int)
        if self.failure_message_max_chars <= 0:
            self.failure_message_max_chars = 5000

    def _as_bool(self, value: object) -> bool:
        text = str(value or "").strip().lower()
        return text in {"1", "true", "yes", "on"}

    def _get(self, env_key: str, default, parser: Callable) -> Optional[object]:
        if env_key not in os.environ:
            return default
        try:
            return parser(os.environ[env_key].strip())
        except ValueError:
            return default


SETTINGS = Settings()
