import pytest

from esclient.config import NOT_ELASTICSEARCH_MESSAGE, YOU_KNOW_FOR_SEARCH
from esclient.exceptions import NotElasticsearchError, NotTrustedProduct
from esclient.integrations.contracts.probe import ProbeStatus, VerificationState
from esclient.verifier import VERIFICATION_RULES, ProductVerifier

PRODUCT_HEADER = {"X-Elastic-Product": "Elasticsearch"}


@pytest.fixture
def verifier():
    return ProductVerifier()


def assert_untrusted(verifier, probe):
    with pytest.raises(NotElasticsearchError) as exc:
        verifier.verify(probe)
    assert str(exc.value) == NOT_ELASTICSEARCH_MESSAGE


@pytest.mark.parametrize("number", [None, "", "5.6.16", "1.7.0", "6.0.0-rc1", "not-a-version"])
def test_missing_old_or_garbage_versions_fail_whatever_the_evidence(verifier, make_probe, number):
    probe = make_probe(
        number=number,
        tagline=YOU_KNOW_FOR_SEARCH,
        build_flavor="default",
        headers=PRODUCT_HEADER,
    )
    assert_untrusted(verifier, probe)


def test_no_version_record_at_all(verifier, make_probe):
    assert_untrusted(verifier, make_probe(headers=PRODUCT_HEADER))


def test_exactly_6_0_0_fails_even_with_tagline(verifier, make_probe):
    assert_untrusted(verifier, make_probe(number="6.0.0", tagline=YOU_KNOW_FOR_SEARCH))


def test_6x_with_tagline_is_trusted(verifier, make_probe):
    probe = make_probe(number="6.5.0", tagline=YOU_KNOW_FOR_SEARCH)
    assert verifier.verify(probe) == VerificationState.VERIFIED_TRUSTED


@pytest.mark.parametrize("tagline", [None, "You Know, for Search", "The OpenSearch Project"])
def test_6x_with_other_tagline_fails(verifier, make_probe, tagline):
    assert_untrusted(verifier, make_probe(number="6.5.0", tagline=tagline))


def test_7x_needs_tagline_and_default_flavor(verifier, make_probe):
    probe = make_probe(number="7.10.0", tagline=YOU_KNOW_FOR_SEARCH, build_flavor="default")
    assert verifier.verify(probe) == VerificationState.VERIFIED_TRUSTED


@pytest.mark.parametrize(
    "tagline,build_flavor",
    [
        (None, "default"),
        (YOU_KNOW_FOR_SEARCH, None),
        (YOU_KNOW_FOR_SEARCH, "oss"),
    ],
)
def test_7x_missing_evidence_fails(verifier, make_probe, tagline, build_flavor):
    assert_untrusted(verifier, make_probe(number="7.10.0", tagline=tagline, build_flavor=build_flavor))


def test_7_13_ignores_product_header(verifier, make_probe):
    probe = make_probe(number="7.13.4", headers=PRODUCT_HEADER)
    assert_untrusted(verifier, probe)


@pytest.mark.parametrize("number", ["7.14-SNAPSHOT", "7.14.0", "7.17.9", "8.3.0", "7.x-SNAPSHOT", "8.0.0-rc1"])
def test_header_band_trusts_product_header_only(verifier, make_probe, number):
    probe = make_probe(number=number, headers={"x-elastic-product": "Elasticsearch"})
    assert verifier.verify(probe) == VerificationState.VERIFIED_TRUSTED


@pytest.mark.parametrize("number", ["7.14-SNAPSHOT", "8.3.0", "7.x-SNAPSHOT"])
def test_header_band_ignores_tagline_and_flavor(verifier, make_probe, number):
    probe = make_probe(number=number, tagline=YOU_KNOW_FOR_SEARCH, build_flavor="default")
    assert_untrusted(verifier, probe)


@pytest.mark.parametrize("value", ["elasticsearch", "OpenSearch", ""])
def test_header_value_is_case_sensitive(verifier, make_probe, value):
    assert_untrusted(verifier, make_probe(number="8.3.0", headers={"x-elastic-product": value}))


def test_rule_table_order_and_alias():
    assert [rule.name for rule in VERIFICATION_RULES] == [
        "product-header",
        "tagline",
        "tagline-and-build-flavor",
    ]
    assert NotTrustedProduct is NotElasticsearchError


@pytest.mark.parametrize("number", ["7.0.0+build1", "7.0.0.1", "7.10.2+oss-build"])
def test_build_metadata_and_extra_segments_stay_in_the_7x_band(verifier, make_probe, number):
    assert_untrusted(verifier, make_probe(number=number, tagline=YOU_KNOW_FOR_SEARCH, build_flavor="oss"))

    probe = make_probe(number=number, tagline=YOU_KNOW_FOR_SEARCH, build_flavor="default")
    assert verifier.verify(probe) == VerificationState.VERIFIED_TRUSTED


def test_6x_with_extra_segment_uses_tagline_band(verifier, make_probe):
    probe = make_probe(number="6.8.23.1", tagline=YOU_KNOW_FOR_SEARCH)
    assert verifier.verify(probe) == VerificationState.VERIFIED_TRUSTED


@pytest.mark.parametrize("status", [ProbeStatus.ERROR, ProbeStatus.UNAUTHORIZED, ProbeStatus.FORBIDDEN])
def test_non_success_status_fails_whatever_the_evidence(verifier, make_probe, status):
    probe = make_probe(number="8.3.0", headers=PRODUCT_HEADER, status=status)
    assert_untrusted(verifier, probe)
