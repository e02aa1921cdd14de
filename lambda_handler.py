from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from s3_put.config import SETTINGS
from s3_put.handler import JobHandler, build_handler


_level = logging.getLevelName(SETTINGS.log_level)
logging.getLogger().setLevel(_level if isinstance(_level, int) else logging.INFO)

_HANDLER: Optional[JobHandler] = None


def _get_handler() -> JobHandler:
    global _HANDLER
    if _HANDLER is None:
        _HANDLER = build_handler(SETTINGS)
    return _HANDLER


def handler(event: Dict[str, Any], context) -> Dict[str, Any]:
    return _get_handler().handle(event, context)
