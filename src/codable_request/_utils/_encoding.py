import json
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import quote

JSONValue = Union[
    str, int, float, bool, None, List["JSONValue"], Dict[str, "JSONValue"]
]
Params = Mapping[str, JSONValue]


def _stringify(value: JSONValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def to_params(params: Params) -> list[str]:
    """Turn a mapping into percent-encoded ``key=value`` strings.

    Order follows the mapping's iteration order.
    """
    return [
        f"{quote(str(key), safe='')}={quote(_stringify(value), safe='')}"
        for key, value in params.items()
    ]


def encode_form(params: Params) -> str:
    return "&".join(to_params(params))


def encode_json(params: Params) -> bytes:
    # TypeError/ValueError from json.dumps reach the caller as-is
    return json.dumps(params, separators=(",", ":"), allow_nan=False).encode("utf-8")


def serialize_body(
    body: Optional[str] = None,
    json_params: Optional[Params] = None,
    form_params: Optional[Params] = None,
) -> Optional[bytes]:
    """Serialize the request body from the first source that is set.

    The raw ``body`` wins, then a non-empty ``json_params``, then a non-empty
    ``form_params``. Returns ``None`` when there is nothing to send.
    """
    if body:
        return body.encode("utf-8")
    if json_params:
        return encode_json(json_params)
    if form_params:
        return encode_form(form_params).encode("utf-8")
    return None
