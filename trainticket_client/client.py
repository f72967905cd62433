"""HTTP client shared by the service wrappers."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

import requests

DEFAULT_HEADERS = {
    "Proxy-Connection": "keep-alive",
    "Accept": "application/json",
    "X-Requested-With": "XMLHttpRequest",
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/92.0.4515.107 Safari/537.36"
    ),
    "Content-Type": "application/json",
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
    "Connection": "keep-alive",
}

_R = TypeVar("_R", bound="ApiResponse")


class ResponseDecodeError(ValueError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(f"{message}\nbody: {body}")
        self.body = body


def json_object(value: Any) -> Mapping[str, Any]:
    """Return ``value`` as a mapping; ``None`` becomes an empty one."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a JSON object, got {type(value).__name__}")
    return value


@dataclass
class ApiResponse:
    """The ``status``/``msg``/``data`` envelope every service answers with."""

    status: int = 0
    msg: str = ""
    data: Any = None

    @classmethod
    def from_dict(cls: type[_R], payload: Any) -> _R:
        fields = json_object(payload)
        return cls(
            status=int(fields.get("status") or 0),
            msg=str(fields.get("msg") or ""),
            data=cls._parse_data(fields.get("data")),
        )

    @classmethod
    def _parse_data(cls, raw: Any) -> Any:
        return raw


def _encode(payload: Any) -> Any:
    if hasattr(payload, "to_dict"):
        return payload.to_dict()
    if isinstance(payload, (list, tuple)):
        return [_encode(item) for item in payload]
    return payload


class ServiceClient:
    """Sends JSON requests to the ticketing system's gateway."""

    def __init__(
        self,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.headers = dict(DEFAULT_HEADERS if headers is None else headers)
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceClient":
        env = os.environ if environ is None else environ
        base_url = env.get("BASE_URL", "")
        if not base_url:
            raise ValueError(
                "the BASE_URL environment variable is required, "
                "for example BASE_URL=http://127.0.0.1:8080"
            )
        return cls(base_url)

    def request(self, method: str, path: str, payload: Any = None) -> Any:
        """Send a request and return the decoded JSON body."""
        response = self.session.request(
            method,
            self.base_url + path,
            json=None if payload is None else _encode(payload),
            headers=self.headers,
        )
        body = response.text
        try:
            return json.loads(body)
        except ValueError as exc:
            raise ResponseDecodeError(str(exc), body) from exc

    def call(self, method: str, path: str, response_type: type[_R], payload: Any = None) -> _R:
        """Send a request and decode the body into ``response_type``."""
        raw = self.request(method, path, payload)
        try:
            return response_type.from_dict(raw)
        except (TypeError, ValueError, KeyError) as exc:
            raise ResponseDecodeError(str(exc), json.dumps(raw)) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class VerificationCodeService:
    """Checks verification codes."""

    client: ServiceClient

    def verify_code(self, code: str) -> bool:
        result = self.client.request("GET", f"/api/v1/verifycode/verify/{code}")
        if result is None:
            return False
        if not isinstance(result, bool):
            raise ResponseDecodeError("expected a JSON boolean", json.dumps(result))
        return result