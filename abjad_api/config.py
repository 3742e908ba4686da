from __future__ import annotations

import json
import os

from .compatibility import CompatibilityWeights

_TRUTHY = {"1", "true", "yes", "y", "on"}


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def _load_weights(raw: str | None) -> CompatibilityWeights:
    """
    COMPATIBILITY_WEIGHTS may hold a JSON object overriding some weights, e.g.
      {"spiritual": 0.4, "elemental": 0.3, "planetary": 0.3}
    """
    if not raw:
        return CompatibilityWeights()
    return CompatibilityWeights.from_mapping(json.loads(raw))


class Config:
    API_TITLE = "Abjad API"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    # maghribi | mashriqi; requests may override it per call.
    ABJAD_DEFAULT_SYSTEM = os.getenv("ABJAD_DEFAULT_SYSTEM", "maghribi").lower()

    MAX_NAME_LENGTH = int(os.getenv("MAX_NAME_LENGTH", "100"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Opt-in: logs every computed total at DEBUG from the engine modules too.
    ENGINE_DEBUG_LOG = _env_bool("ENGINE_DEBUG_LOG")

    COMPATIBILITY_WEIGHTS = _load_weights(os.getenv("COMPATIBILITY_WEIGHTS"))
