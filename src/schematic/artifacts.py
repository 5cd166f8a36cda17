from __future__ import annotations

import json
from typing import Any

from contracts.schematic import SchematicResult, Token


def _stable_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"), indent=2) + "\n"


def serialize_schematic_result(result: SchematicResult) -> str:
    return _stable_json(result.to_dict())


def serialize_tokens(tokens: tuple[Token, ...]) -> str:
    return _stable_json([t.to_dict() for t in tokens])
