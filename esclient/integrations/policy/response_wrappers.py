from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from esclient.integrations.contracts.probe import ProbeResponse, ProbeStatus, VersionRecord
from esclient.integrations.contracts.transport import Response

logger = logging.getLogger(__name__)


def classify_status(status: int) -> ProbeStatus:
    if 200 <= status < 300:
        return ProbeStatus.SUCCESS
    if status == 401:
        return ProbeStatus.UNAUTHORIZED
    if status == 403:
        return ProbeStatus.FORBIDDEN
    return ProbeStatus.ERROR


def normalize_probe_response(response: Response) -> ProbeResponse:
    """
    Build the ProbeResponse view of a bootstrap answer.

    Never raises on odd bodies: a missing or malformed version record just
    leaves `version` unset, which verification treats as untrusted.
    """
    headers = {str(k).lower(): str(v) for k, v in response.headers.items()}
    return ProbeResponse(
        status=classify_status(response.status),
        headers=headers,
        version=_version_record(response.dig("version")),
    )


def _version_record(raw: Any) -> Optional[VersionRecord]:
    if not isinstance(raw, Mapping):
        return None
    try:
        return VersionRecord(**raw)
    except (TypeError, ValidationError) as exc:
        logger.debug("Ignoring malformed version record %r: %s", raw, exc)
        return None
