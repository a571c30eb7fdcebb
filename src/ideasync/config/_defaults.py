"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be fed straight to deep_merge, which
never mutates its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "api": {
        "base_url": "http://localhost:8000",
        "timeout": 30.0,
        "page_size": 10,
    },
    "auth": {
        "token": "",
    },
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
}
