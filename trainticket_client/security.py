"""Security service: named security configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .client import ApiResponse, ServiceClient, json_object

_CONFIGS = "/api/v1/securityservice/securityConfigs"


@dataclass
class SecurityConfig:
    """A named security setting with its value and description."""

    id: str = ""
    name: str = ""
    value: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "SecurityConfig":
        fields = json_object(payload)
        return cls(
            id=str(fields.get("id") or ""),
            name=str(fields.get("name") or ""),
            value=str(fields.get("value") or ""),
            description=str(fields.get("description") or ""),
        )


@dataclass
class SecurityConfigResponse(ApiResponse):
    data: SecurityConfig = field(default_factory=SecurityConfig)

    @classmethod
    def _parse_data(cls, raw: Any) -> SecurityConfig:
        return SecurityConfig.from_dict(raw)


@dataclass
class SecurityConfigsResponse(ApiResponse):
    data: list[SecurityConfig] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[SecurityConfig]:
        return [SecurityConfig.from_dict(item) for item in raw or []]


@dataclass
class SecurityService:
    """Operations of the security service."""

    client: ServiceClient

    def find_all(self) -> SecurityConfigsResponse:
        return self.client.call("GET", _CONFIGS, SecurityConfigsResponse)

    def add(self, config: SecurityConfig) -> SecurityConfigResponse:
        return self.client.call("POST", _CONFIGS, SecurityConfigResponse, config)

    def modify(self, config: SecurityConfig) -> SecurityConfigResponse:
        return self.client.call("PUT", _CONFIGS, SecurityConfigResponse, config)

    def delete(self, config_id: str) -> ApiResponse:
        return self.client.call("DELETE", f"{_CONFIGS}/{config_id}", ApiResponse)

    def check(self, account_id: str) -> SecurityConfigResponse:
        return self.client.call("GET", f"{_CONFIGS}/{account_id}", SecurityConfigResponse)