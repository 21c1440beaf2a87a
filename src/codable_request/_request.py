from logging import getLogger
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from httpx import AsyncClient, Client, HTTPStatusError, Response, StreamError
from pydantic import TypeAdapter, ValidationError

from ._config import Config
from ._utils import (
    Encoding,
    HttpMethod,
    Params,
    RequestSpec,
    get_httpx_client_kwargs,
    serialize_body,
)
from ._utils.constants import (
    CACHE_CONTROL_NO_CACHE,
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    ERROR_STATUS_THRESHOLD,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CACHE_CONTROL,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    LOGGER_NAME,
)
from .models import ErrorResponse, RemoteError

T = TypeVar("T")
E = TypeVar("E")

logger = getLogger(LOGGER_NAME)


def build_request_spec(
    method: Union[HttpMethod, str],
    url: str,
    *,
    body: Optional[str] = None,
    json_params: Optional[Params] = None,
    form_params: Optional[Params] = None,
    encoding: Union[Encoding, str] = Encoding.JSON,
    bearer_token: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    user_agent: Optional[str] = None,
) -> RequestSpec:
    """Describe the request without sending it.

    Headers are applied in a fixed order, each one replacing a same-named
    header set before it: ``Accept``, ``Cache-Control`` and ``User-Agent``,
    then the caller's ``headers``, then ``Authorization`` when a bearer token
    is given, then ``Content-Type``.

    ``Content-Type`` is taken from ``encoding`` only. It is not inferred from
    the body source, so sending ``form_params`` with ``encoding="json"`` is
    possible and is the caller's responsibility to avoid.

    Raises:
        ValueError: Unknown method or encoding.
        TypeError: ``json_params`` holds a value the JSON encoder rejects.
    """
    encoding = Encoding.parse(encoding)
    content = serialize_body(body, json_params, form_params)

    spec = (
        RequestSpec(method=HttpMethod.parse(method), url=url)
        .with_content(content)
        .with_header(HEADER_ACCEPT, CONTENT_TYPE_JSON)
        .with_header(HEADER_CACHE_CONTROL, CACHE_CONTROL_NO_CACHE)
        .with_header(HEADER_USER_AGENT, user_agent or Config().user_agent)
        .with_headers(headers)
    )
    if bearer_token:
        spec = spec.with_header(HEADER_AUTHORIZATION, f"Bearer {bearer_token}")

    content_type = (
        CONTENT_TYPE_JSON if encoding is Encoding.JSON else CONTENT_TYPE_FORM
    )
    return spec.with_header(HEADER_CONTENT_TYPE, content_type)


def _masked_headers(spec: RequestSpec) -> dict[str, str]:
    return {
        name: "Bearer ***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in spec.headers.items()
    }


def _decode(model: Type[T], content: bytes) -> T:
    return TypeAdapter(model).validate_json(content)


def _error_from_response(response: Response, error_type: Type[Any]) -> RemoteError:
    try:
        error = _decode(error_type, response.content)
    except ValidationError:
        logger.warning(
            f"Could not decode {response.status_code} response body as "
            f"{getattr(error_type, '__name__', error_type)}; using raw body"
        )
        return RemoteError(
            ErrorResponse.fallback(response.text, response.status_code),
            response.status_code,
            response.text,
            response=response,
            is_fallback=True,
        )
    return RemoteError(error, response.status_code, response.text, response=response)


def _error_from_status_error(
    response: Response, content: bytes, error_type: Type[Any]
) -> RemoteError:
    # No fallback here: a ValidationError propagates to the caller.
    error = _decode(error_type, content)
    return RemoteError(error, response.status_code, response.text, response=response)


def _handle_response(
    response: Response, success_type: Type[T], error_type: Type[Any]
) -> T:
    logger.debug(f"Response: {response.status_code} {response.request.url}")

    if response.status_code >= ERROR_STATUS_THRESHOLD:
        raise _error_from_response(response, error_type)

    return _decode(success_type, response.content)


def _send(
    client: Client, spec: RequestSpec, success_type: Type[T], error_type: Type[Any]
) -> T:
    request = client.build_request(
        spec.method.value, spec.url, headers=dict(spec.headers), content=spec.content
    )
    try:
        response = client.send(request)
    except HTTPStatusError as e:
        try:
            content = e.response.read()
        except StreamError:
            # Closed before anyone read it; the empty body fails to decode.
            content = b""
        raise _error_from_status_error(e.response, content, error_type) from e

    return _handle_response(response, success_type, error_type)


async def _send_async(
    client: AsyncClient,
    spec: RequestSpec,
    success_type: Type[T],
    error_type: Type[Any],
) -> T:
    request = client.build_request(
        spec.method.value, spec.url, headers=dict(spec.headers), content=spec.content
    )
    try:
        response = await client.send(request)
    except HTTPStatusError as e:
        try:
            content = await e.response.aread()
        except StreamError:
            content = b""
        raise _error_from_status_error(e.response, content, error_type) from e

    return _handle_response(response, success_type, error_type)


def request(
    method: Union[HttpMethod, str],
    url: str,
    success_type: Type[T],
    error_type: Type[E] = ErrorResponse,  # type: ignore[assignment]
    *,
    body: Optional[str] = None,
    json_params: Optional[Params] = None,
    form_params: Optional[Params] = None,
    encoding: Union[Encoding, str] = Encoding.JSON,
    bearer_token: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[Client] = None,
    config: Optional[Config] = None,
) -> T:
    """Send one HTTP request and decode the response into ``success_type``.

    The body comes from the first non-empty source among ``body`` (sent as
    is), ``json_params`` (JSON object) and ``form_params``
    (``application/x-www-form-urlencoded``). Only POST, PUT and PATCH send a
    body.

    Exactly one request is sent; there are no retries. Concurrent calls are
    independent and are safe as long as a shared ``client`` is.

    A response event hook on ``client`` that calls ``raise_for_status()`` must
    call ``response.read()`` first. httpx closes the response before the
    ``HTTPStatusError`` arrives here, so an unread body cannot be decoded and
    the call fails with ``pydantic.ValidationError``.

    Args:
        method: HTTP method, as ``HttpMethod`` or a string such as ``"get"``.
        url: Absolute URL.
        success_type: Any type pydantic can validate from JSON.
        error_type: Type used to decode error bodies. Defaults to
            ``ErrorResponse``.
        body: Raw request body.
        json_params: Parameters serialized as a JSON object.
        form_params: Parameters serialized as a URL-encoded form.
        encoding: ``"json"`` or ``"form"``; selects ``Content-Type`` only.
        bearer_token: Sent as ``Authorization: Bearer <token>`` when non-empty.
        headers: Extra headers, applied after the fixed ones.
        client: httpx client to send with. It is not closed. When omitted a
            client is built from ``config`` and closed after the call.
        config: Settings for the client built when ``client`` is omitted.

    Returns:
        The response body decoded as ``success_type``.

    Raises:
        RemoteError: The status code was 400 or above, or the transport raised
            ``httpx.HTTPStatusError``. ``error`` holds the decoded
            ``error_type`` value, or a fallback ``ErrorResponse`` built from
            the raw body and status code when decoding it failed.
        pydantic.ValidationError: A success body did not match
            ``success_type``, or an ``HTTPStatusError`` body did not match
            ``error_type``.
        httpx.HTTPError: Network failures, unchanged.

    Examples:
        ```python
        from codable_request import request

        result = request("GET", "https://httpbin.org/get", HTTPBin)
        ```
    """
    config = config or Config()
    spec = build_request_spec(
        method,
        url,
        body=body,
        json_params=json_params,
        form_params=form_params,
        encoding=encoding,
        bearer_token=bearer_token,
        headers=headers,
        user_agent=config.user_agent,
    )
    logger.debug(f"Request: {spec.method.value} {spec.url}")
    logger.debug(f"HEADERS: {_masked_headers(spec)}")

    if client is not None:
        return _send(client, spec, success_type, error_type)

    with Client(**get_httpx_client_kwargs(config)) as owned_client:
        return _send(owned_client, spec, success_type, error_type)


async def request_async(
    method: Union[HttpMethod, str],
    url: str,
    success_type: Type[T],
    error_type: Type[E] = ErrorResponse,  # type: ignore[assignment]
    *,
    body: Optional[str] = None,
    json_params: Optional[Params] = None,
    form_params: Optional[Params] = None,
    encoding: Union[Encoding, str] = Encoding.JSON,
    bearer_token: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[AsyncClient] = None,
    config: Optional[Config] = None,
) -> T:
    """Asynchronously send one HTTP request; see ``request``."""
    config = config or Config()
    spec = build_request_spec(
        method,
        url,
        body=body,
        json_params=json_params,
        form_params=form_params,
        encoding=encoding,
        bearer_token=bearer_token,
        headers=headers,
        user_agent=config.user_agent,
    )
    logger.debug(f"Request: {spec.method.value} {spec.url}")
    logger.debug(f"HEADERS: {_masked_headers(spec)}")

    if client is not None:
        return await _send_async(client, spec, success_type, error_type)

    async with AsyncClient(**get_httpx_client_kwargs(config)) as owned_client:
        return await _send_async(owned_client, spec, success_type, error_type)
