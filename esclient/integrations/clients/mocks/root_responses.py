"""Registry of canned `GET /` answers for the server flavours verification cares about."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from esclient.config import PRODUCT_HEADER, PRODUCT_NAME, YOU_KNOW_FOR_SEARCH

RootBuilder = Callable[[], Dict[str, Any]]


def _root(
    number: str,
    *,
    tagline: Optional[str] = YOU_KNOW_FOR_SEARCH,
    build_flavor: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    status: int = 200,
) -> Dict[str, Any]:
    version: Dict[str, Any] = {"number": number, "build_type": "docker"}
    if build_flavor is not None:
        version["build_flavor"] = build_flavor
    body: Dict[str, Any] = {"name": "mock-node", "cluster_name": "mock-cluster", "version": version}
    if tagline is not None:
        body["tagline"] = tagline
        version["tagline"] = tagline
    return {"status": status, "headers": dict(headers or {}), "body": body}


def build_es6_root() -> Dict[str, Any]:
    return _root("6.8.23")


def build_es7_root() -> Dict[str, Any]:
    return _root("7.10.2", build_flavor="default")


def build_es7_oss_root() -> Dict[str, Any]:
    return _root("7.10.2", build_flavor="oss")


def build_es8_root() -> Dict[str, Any]:
    return _root("8.3.0", build_flavor="default", headers={PRODUCT_HEADER: PRODUCT_NAME})


def build_snapshot_root() -> Dict[str, Any]:
    return _root("7.x-SNAPSHOT", build_flavor="default", headers={PRODUCT_HEADER: PRODUCT_NAME})


def build_opensearch_root() -> Dict[str, Any]:
    root = _root("2.11.0", tagline="The OpenSearch Project: https://opensearch.org/")
    root["body"]["version"]["distribution"] = "opensearch"
    return root


def build_unauthorized_root() -> Dict[str, Any]:
    return {"status": 401, "headers": {}, "body": {"error": "security_exception", "status": 401}}


def build_forbidden_root() -> Dict[str, Any]:
    return {"status": 403, "headers": {}, "body": {"error": "security_exception", "status": 403}}


_REGISTRY: Dict[str, RootBuilder] = {
    "6": build_es6_root,
    "7": build_es7_root,
    "7-oss": build_es7_oss_root,
    "8": build_es8_root,
    "snapshot": build_snapshot_root,
    "opensearch": build_opensearch_root,
    "unauthorized": build_unauthorized_root,
    "forbidden": build_forbidden_root,
}


def get_root_builder(flavour: str) -> RootBuilder:
    """Return the root response builder for a flavour, falling back to the current major."""
    return _REGISTRY.get(flavour, build_es8_root)


def available_flavours() -> list[str]:
    return sorted(_REGISTRY)
