import pytest

from kubergrunt.errors import RequiredArgsError
from kubergrunt.subject import (
    DEFAULT_TLS_FLAGS,
    DistinguishedName,
    TLSSubjectInfo,
    first_non_empty,
    parse_or_create_tls_subject_info,
    parse_tls_flags_to_name,
)


def test_parse_json_org_org_unit():
    info = parse_or_create_tls_subject_info('{"org": "Gruntwork", "org_unit": "Eng"}')
    assert info.org == "Gruntwork"
    assert info.org_unit == "Eng"


def test_parse_json_organization_organizational_unit():
    info = parse_or_create_tls_subject_info(
        '{"organization": "Gruntwork", "organizational_unit": "Eng"}'
    )
    assert info.org == "Gruntwork"
    assert info.org_unit == "Eng"


def test_parse_json_locality_and_province():
    info = parse_or_create_tls_subject_info(
        '{"common_name": "svc", "locality": "Phoenix", "province": "AZ", "country": "US"}'
    )
    assert info == TLSSubjectInfo(
        common_name="svc", country="US", city="Phoenix", state="AZ"
    )


def test_empty_string_gives_empty_subject():
    assert parse_or_create_tls_subject_info("") == TLSSubjectInfo()


def test_short_spelling_wins_when_both_given():
    info = parse_or_create_tls_subject_info(
        '{"org": "Gruntwork", "organization": "Other"}'
    )
    assert info.org == "Gruntwork"


def test_empty_short_spelling_falls_back():
    info = parse_or_create_tls_subject_info('{"city": "", "locality": "Phoenix"}')
    assert info.city == "Phoenix"


@pytest.mark.parametrize("text", ["{not json", "[1, 2]", '{"org": 3}'])
def test_invalid_json_raises(text):
    with pytest.raises(ValueError):
        parse_or_create_tls_subject_info(text)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((None, "b"), "b"),
        (("", "b"), "b"),
        (("a", "b"), "a"),
        ((None, ""), ""),
        ((), ""),
    ],
)
def test_first_non_empty(args, expected):
    assert first_non_empty(*args) == expected


def test_distinguished_name_leaves_out_empty_fields():
    name = TLSSubjectInfo(common_name="svc", org="Gruntwork").distinguished_name()
    assert name == DistinguishedName(common_name="svc", organization=("Gruntwork",))
    assert name.locality == ()


def test_distinguished_name_with_all_fields():
    info = TLSSubjectInfo(
        common_name="svc",
        country="US",
        org="Gruntwork",
        org_unit="Eng",
        city="Phoenix",
        state="AZ",
    )
    assert info.distinguished_name() == DistinguishedName(
        common_name="svc",
        organization=("Gruntwork",),
        organizational_unit=("Eng",),
        locality=("Phoenix",),
        province=("AZ",),
        country=("US",),
    )


def test_flags_only():
    values = {"tls-common-name": "svc", "tls-org": "Gruntwork", "tls-city": "Phoenix"}
    name = parse_tls_flags_to_name(values, DEFAULT_TLS_FLAGS)
    assert name.common_name == "svc"
    assert name.organization == ("Gruntwork",)
    assert name.locality == ("Phoenix",)


def test_json_supplies_required_fields():
    values = {"tls-subject-json": '{"common_name": "svc", "org": "Gruntwork"}'}
    name = parse_tls_flags_to_name(values, DEFAULT_TLS_FLAGS)
    assert name.common_name == "svc"
    assert name.organization == ("Gruntwork",)


def test_flags_override_json():
    values = {
        "tls-subject-json": '{"common_name": "svc", "org": "Gruntwork", "state": "AZ"}',
        "tls-common-name": "other",
        "tls-state": "CA",
    }
    name = parse_tls_flags_to_name(values, DEFAULT_TLS_FLAGS)
    assert name.common_name == "other"
    assert name.province == ("CA",)
    assert name.organization == ("Gruntwork",)


def test_missing_common_name_raises():
    with pytest.raises(RequiredArgsError):
        parse_tls_flags_to_name({"tls-org": "Gruntwork"}, DEFAULT_TLS_FLAGS)


def test_missing_org_raises():
    with pytest.raises(RequiredArgsError):
        parse_tls_flags_to_name({"tls-common-name": "svc"}, DEFAULT_TLS_FLAGS)