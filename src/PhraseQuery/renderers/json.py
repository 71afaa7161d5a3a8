"""JSON output renderers."""

from __future__ import annotations

import json
from typing import Any


def render_json(payload: Any) -> str:
    """Serialize a compiled backend query as pretty JSON.

    Non-ASCII characters are written as-is.
    """
    return json.dumps(payload, ensure_ascii=False, indent=2)
