"""
HTTP transports for RequestDescriptions.

HTTPTransport sends through requests and signs with requests-oauthlib.
AsyncHTTPTransport sends through aiohttp and signs with oauthlib directly.
Both decode the JSON response and call exactly one of the success or failure
continuations per request.
"""
import asyncio
import json
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlencode, urljoin

import aiohttp
import requests

from .auth import Auth
from .config import Config
from .errors import ApiResponseError, RateLimitExceeded, TransportError
from .logger import logger
from .request import RequestDescription

SuccessHandler = Callable[[Any], None]
FailureHandler = Callable[[Exception], None]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_url(base_url: str, path: str) -> str:
    if not base_url.endswith("/"):
        base_url += "/"
    return urljoin(base_url, path)


def _error_details(status_code: int, data: Any):
    message, code = f"HTTP {status_code}", None
    if isinstance(data, dict):
        if data.get("errors"):
            errors = data["errors"]
            first = errors[0] if isinstance(errors, list) else errors
            if isinstance(first, dict):
                message = first.get("message", message)
                code = first.get("code")
            else:
                message = str(first)
        elif data.get("error"):
            message = str(data["error"])
    return message, code


def check_for_twitter_error(status_code: int, data: Any, headers: Mapping[str, str]) -> None:
    """
    Raise if the API answered with an error.

    Args:
        status_code: HTTP status of the response
        data: Decoded JSON body, or None when it was not JSON
        headers: Response headers

    Raises:
        RateLimitExceeded: on HTTP 429
        ApiResponseError: on any other error status or error payload
    """
    has_error_payload = isinstance(data, dict) and bool(data.get("errors") or data.get("error"))
    if status_code < 400 and not has_error_payload:
        return

    message, code = _error_details(status_code, data)
    if status_code == 429:
        reset = headers.get("x-rate-limit-reset")
        raise RateLimitExceeded(message, code=code, status_code=status_code,
                                reset_at=int(reset) if reset and reset.isdigit() else None)
    raise ApiResponseError(message, code=code, status_code=status_code)


def parse_response(status_code: int, body: str, headers: Mapping[str, str]) -> Any:
    """Decode a response body and raise the matching error for failures."""
    try:
        data = json.loads(body) if body else None
    except ValueError:
        data = None
    check_for_twitter_error(status_code, data, headers)
    if data is None:
        raise TransportError(f"Response is not valid JSON (HTTP {status_code})")
    return data


def _succeed(success: Optional[SuccessHandler], payload: Any) -> None:
    if success is None:
        logger.debug("No success handler, dropping response")
        return
    success(payload)


def _fail(failure: Optional[FailureHandler], error: TransportError) -> None:
    logger.warning("Request failed: %s", error)
    if failure is None:
        raise error
    failure(error)


class HTTPTransport:
    """Blocking transport built on a requests.Session."""

    def __init__(self, auth: Optional[Auth] = None, base_url: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.auth = auth
        self.base_url = base_url or Config.API_URL
        self.timeout = timeout if timeout is not None else Config.TIMEOUT
        self.session = session or requests.Session()

    def send(self, request: RequestDescription, success: Optional[SuccessHandler] = None,
             failure: Optional[FailureHandler] = None) -> None:
        """
        Send a request and dispatch the outcome.

        Args:
            request: Request built by one of the statuses builders
            success: Called with the decoded JSON payload
            failure: Called with a TransportError; re-raised when omitted
        """
        try:
            payload = self._perform(request)
        except TransportError as e:
            _fail(failure, e)
            return
        _succeed(success, payload)

    def _perform(self, request: RequestDescription) -> Any:
        url = build_url(self.base_url, request.path)
        params = request.encoded_parameters()
        auth = self.auth.oauth1() if self.auth else None
        logger.debug("%s %s %s", request.method, url, sorted(params))

        try:
            if request.method == "GET":
                resp = self.session.get(url, params=params, auth=auth, timeout=self.timeout)
            elif request.is_multipart:
                files = {request.attachment.field_name: request.attachment.payload}
                resp = self.session.post(url, data=params, files=files, auth=auth, timeout=self.timeout)
            else:
                resp = self.session.post(url, data=params, auth=auth, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        return parse_response(resp.status_code, resp.text, resp.headers)


class AsyncHTTPTransport:
    """Non-blocking transport built on aiohttp."""

    def __init__(self, auth: Optional[Auth] = None, base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.auth = auth
        self.base_url = base_url or Config.API_URL
        self.timeout = timeout if timeout is not None else Config.TIMEOUT
        self.session = session

    async def send(self, request: RequestDescription, success: Optional[SuccessHandler] = None,
                   failure: Optional[FailureHandler] = None) -> None:
        try:
            payload = await self._perform(request)
        except TransportError as e:
            _fail(failure, e)
            return
        _succeed(success, payload)

    async def _perform(self, request: RequestDescription) -> Any:
        if self.session is not None:
            return await self._request(self.session, request)
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            return await self._request(session, request)

    def _sign(self, url: str, method: str, body: Optional[str] = None,
              headers: Optional[dict] = None) -> dict:
        headers = dict(headers or {})
        if self.auth is None:
            return headers
        _, signed, _ = self.auth.oauth_client().sign(url, http_method=method, body=body, headers=headers)
        return signed

    async def _request(self, session, request: RequestDescription) -> Any:
        url = build_url(self.base_url, request.path)
        params = request.encoded_parameters()
        logger.debug("%s %s %s", request.method, url, sorted(params))

        try:
            if request.method == "GET":
                if params:
                    url = f"{url}?{urlencode(params)}"
                ctx = session.get(url, headers=self._sign(url, "GET"))
            elif request.is_multipart:
                form = aiohttp.FormData()
                for key, value in params.items():
                    form.add_field(key, value)
                form.add_field(request.attachment.field_name, request.attachment.payload,
                               filename="media", content_type="application/octet-stream")
                # multipart bodies are not part of the OAuth signature base string
                ctx = session.post(url, data=form, headers=self._sign(url, "POST"))
            else:
                body = urlencode(params) if params else None
                headers = {"Content-Type": FORM_CONTENT_TYPE} if body else None
                ctx = session.post(url, data=body, headers=self._sign(url, "POST", body, headers))

            async with ctx as resp:
                status = resp.status
                # invalid UTF-8 is replaced, not raised
                text = (await resp.read()).decode("utf-8", errors="replace")
                resp_headers = resp.headers
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        return parse_response(status, text, resp_headers)
