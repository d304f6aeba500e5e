from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Union

from flask import Flask, request
from flask_cors import CORS

from ..core.exceptions import OriginNotAllowedError

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization", "X-Request-Id")


def _split(value: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(item.strip() for item in value if item and item.strip())


@dataclass(frozen=True)
class CorsPolicy:
    """Which browser origins may call the API.

    ``*`` in ``origins`` allows any origin. Requests without an Origin header
    (curl, server-to-server) are always allowed.
    """

    origins: tuple[str, ...] = ()
    patterns: tuple[Pattern[str], ...] = ()

    @classmethod
    def from_settings(
        cls,
        origins: Union[str, Iterable[str], None],
        patterns: Union[str, Iterable[str], None] = None,
    ) -> "CorsPolicy":
        return cls(
            origins=_split(origins),
            patterns=tuple(re.compile(p) for p in _split(patterns)),
        )

    @property
    def allow_any(self) -> bool:
        return "*" in self.origins

    def allows(self, origin: Optional[str]) -> bool:
        if not origin or self.allow_any:
            return True
        if origin in self.origins:
            return True
        return any(p.fullmatch(origin) for p in self.patterns)

    def cors_origins(self) -> list[Union[str, Pattern[str]]]:
        """Origins in the form flask-cors expects; patterns anchored to match whole origins."""

        if self.allow_any:
            return ["*"]
        return [*self.origins, *(re.compile(rf"(?:{p.pattern})\Z") for p in self.patterns)]


def register(app: Flask, policy: CorsPolicy) -> None:
    @app.before_request
    def enforce_origin():
        origin = request.headers.get("Origin")
        if not policy.allows(origin):
            raise OriginNotAllowedError(origin)
        if request.method == "OPTIONS":
            return app.response_class(status=204)
        return None

    CORS(
        app,
        origins=policy.cors_origins(),
        methods=list(ALLOWED_METHODS),
        allow_headers=list(ALLOWED_HEADERS),
        supports_credentials=True,
    )
