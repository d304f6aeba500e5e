from __future__ import annotations

from typing import Any

from flask import Flask, request

from ..core.constants import DEFAULT_API_PREFIX


def api_path(app: Flask, path: str) -> str:
    """Join the configured API prefix (``""`` or ``"/api"``) with ``path``."""

    prefix = str(app.config.get("API_PREFIX", DEFAULT_API_PREFIX) or "").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return f"{prefix}{path}"


def available_endpoints(app: Flask) -> list[str]:
    out: list[str] = []
    for rule in app.url_map.iter_rules():
        if rule.endpoint == "static":
            continue
        for method in sorted((rule.methods or set()) - {"HEAD", "OPTIONS"}):
            out.append(f"{method} {rule.rule}")
    return sorted(set(out), key=lambda s: (s.split(" ", 1)[1], s))


def json_body() -> dict[str, Any]:
    """JSON object body, falling back to form fields for urlencoded posts."""

    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
