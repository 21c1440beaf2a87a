from ._encoding import (
    JSONValue,
    Params,
    encode_form,
    encode_json,
    serialize_body,
    to_params,
)
from ._request_spec import BODY_METHODS, Encoding, HttpMethod, RequestSpec
from ._ssl_context import create_ssl_context, get_httpx_client_kwargs

__all__ = [
    "BODY_METHODS",
    "Encoding",
    "HttpMethod",
    "JSONValue",
    "Params",
    "RequestSpec",
    "create_ssl_context",
    "encode_form",
    "encode_json",
    "get_httpx_client_kwargs",
    "serialize_body",
    "to_params",
]
