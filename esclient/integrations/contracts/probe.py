"""
Bootstrap probe contracts.

ProbeResponse is the semantic view of the `GET /` answer that product
verification works on; VerificationState is the cached outcome.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProbeStatus(str, Enum):
    SUCCESS = "success"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    ERROR = "error"


class VerificationState(str, Enum):
    UNVERIFIED = "UNVERIFIED"
    VERIFIED_TRUSTED = "VERIFIED_TRUSTED"
    VERIFIED_WITH_PRIVILEGE_WARNING = "VERIFIED_WITH_PRIVILEGE_WARNING"


class VersionRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    number: Optional[str] = None
    tagline: Optional[str] = None
    build_flavor: Optional[str] = None


class ProbeResponse(BaseModel):
    status: ProbeStatus = ProbeStatus.SUCCESS
    headers: Dict[str, str] = Field(default_factory=dict)   # keys lower-cased
    version: Optional[VersionRecord] = None

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    @property
    def version_number(self) -> Optional[str]:
        return self.version.number if self.version else None

    @property
    def tagline(self) -> Optional[str]:
        return self.version.tagline if self.version else None

    @property
    def build_flavor(self) -> Optional[str]:
        return self.version.build_flavor if self.version else None
