from decimal import Decimal
from typing import Any, Dict

import ijson


def stream_json_dict(body) -> Dict[str, Any]:
    """Parses the top level JSON object of a body one key at a time."""
    json_result = {}

    for k, v in ijson.kvitems(body, ""):
        json_result[k] = _convert_decimals_to_floats(v)

    return json_result


def _convert_decimals_to_floats(obj):
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, dict):
        return {k: _convert_decimals_to_floats(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_decimals_to_floats(v) for v in obj]
    return obj
