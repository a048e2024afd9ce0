"""
Client version and the compact token used in client-identification headers.
"""

from __future__ import annotations

import re

__version__ = "8.3.0"

_META_VERSION_RE = re.compile(r"^([0-9]+\.[0-9]+\.[0-9]+)\.?([a-z0-9.-]+)?$")


def client_meta_version(version: str = __version__) -> str:
    """
    Return the meta-header form of a client version.

    Pre-release versions (X.X.X.pre, X.X.X-alpha1, ...) collapse to X.X.Xp.
    Anything else is returned unchanged.
    """
    match = _META_VERSION_RE.match(version)
    if match and match.group(2):
        return f"{match.group(1)}p"
    return version


# Service entry for the x-elastic-client-meta header.
ELASTICSEARCH_SERVICE_VERSION = ("es", client_meta_version())
