"""
Product verification.

Decides from a single bootstrap response whether the server is
Elasticsearch. The product changed how it identifies itself over time
(tagline, then tagline + build flavour, then a dedicated response header),
so the check depends on the version the server reports.

Rules are evaluated in order; the first rule whose version range matches
decides. A server that matches no rule is not trusted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from esclient.config import PRODUCT_HEADER, PRODUCT_NAME, TRUSTED_BUILD_FLAVOR, YOU_KNOW_FOR_SEARCH
from esclient.exceptions import NotElasticsearchError
from esclient.integrations.contracts.probe import ProbeResponse, ProbeStatus, VerificationState
from esclient.versioning import VersionSpec

logger = logging.getLogger(__name__)

V6_0_0 = VersionSpec.parse("6.0.0")
V7_0_0 = VersionSpec.parse("7.0.0")
V7_14_SNAPSHOT = VersionSpec.parse("7.14.0-SNAPSHOT")
V7_X_SNAPSHOT = VersionSpec.parse("7.x-SNAPSHOT")


def _has_product_header(probe: ProbeResponse) -> bool:
    return probe.header(PRODUCT_HEADER) == PRODUCT_NAME


def _has_tagline(probe: ProbeResponse) -> bool:
    return probe.tagline == YOU_KNOW_FOR_SEARCH


def _has_tagline_and_default_flavor(probe: ProbeResponse) -> bool:
    return _has_tagline(probe) and probe.build_flavor == TRUSTED_BUILD_FLAVOR


@dataclass(frozen=True)
class VerificationRule:
    name: str
    applies_to: Callable[[VersionSpec], bool]
    evidence: Callable[[ProbeResponse], bool]


# Append new rows for new identification contracts; never rewrite old ones.
VERIFICATION_RULES: Tuple[VerificationRule, ...] = (
    VerificationRule(
        name="product-header",
        applies_to=lambda v: v == V7_X_SNAPSHOT or v >= V7_14_SNAPSHOT,
        evidence=_has_product_header,
    ),
    VerificationRule(
        name="tagline",
        applies_to=lambda v: V6_0_0 < v < V7_0_0,
        evidence=_has_tagline,
    ),
    VerificationRule(
        name="tagline-and-build-flavor",
        applies_to=lambda v: V7_0_0 <= v < V7_14_SNAPSHOT,
        evidence=_has_tagline_and_default_flavor,
    ),
)


def parse_server_version(number: Optional[str]) -> Optional[VersionSpec]:
    if not number:
        return None
    try:
        return VersionSpec.parse(number)
    except ValueError:
        return None


class ProductVerifier:
    def __init__(self, rules: Tuple[VerificationRule, ...] = VERIFICATION_RULES):
        self.rules = rules

    def verify(self, probe: ProbeResponse) -> VerificationState:
        """
        Classify a successful bootstrap response.

        Returns:
            VerificationState.VERIFIED_TRUSTED

        Raises:
            NotElasticsearchError: non-success status, version missing,
                unparseable or older than 6.0.0, or the evidence its version
                band requires is absent.
        """
        if probe.status is not ProbeStatus.SUCCESS:
            logger.info("Bootstrap response status is %s, not success", probe.status.value)
            raise NotElasticsearchError()

        version = parse_server_version(probe.version_number)
        if version is None or version < V6_0_0:
            logger.info("Server version %r is not a supported Elasticsearch", probe.version_number)
            raise NotElasticsearchError()

        for rule in self.rules:
            if not rule.applies_to(version):
                continue
            if rule.evidence(probe):
                logger.debug("Server %s verified by rule %s", version, rule.name)
                return VerificationState.VERIFIED_TRUSTED
            logger.info("Server %s failed the %s check", version, rule.name)
            raise NotElasticsearchError()

        logger.info("No verification rule covers server version %s", version)
        raise NotElasticsearchError()
