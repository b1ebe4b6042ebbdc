"""TLS certificate subject information taken from JSON and command line flags."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass

from kubergrunt.cli_values import require_string_flag

_JSON_FIELDS = frozenset(
    {
        "common_name",
        "country",
        "org",
        "organization",
        "org_unit",
        "organizational_unit",
        "city",
        "locality",
        "state",
        "province",
    }
)


@dataclass(frozen=True)
class DistinguishedName:
    """The distinguished name identifying the subject of a certificate."""

    common_name: str = ""
    organization: tuple[str, ...] = ()
    organizational_unit: tuple[str, ...] = ()
    locality: tuple[str, ...] = ()
    province: tuple[str, ...] = ()
    country: tuple[str, ...] = ()


@dataclass
class TLSSubjectInfo:
    """Subject fields of a TLS certificate."""

    common_name: str = ""
    country: str = ""
    org: str = ""
    org_unit: str = ""
    city: str = ""
    state: str = ""

    def distinguished_name(self) -> DistinguishedName:
        """Return the subject as a distinguished name, leaving out empty optional fields."""
        return DistinguishedName(
            common_name=self.common_name,
            organization=(self.org,),
            organizational_unit=(self.org_unit,) if self.org_unit else (),
            locality=(self.city,) if self.city else (),
            province=(self.state,) if self.state else (),
            country=(self.country,) if self.country else (),
        )


@dataclass(frozen=True)
class TLSFlags:
    """Names of the command line flags that describe a certificate subject."""

    subject_info_json_flag_name: str
    common_name_flag_name: str
    org_flag_name: str
    org_unit_flag_name: str
    city_flag_name: str
    state_flag_name: str
    country_flag_name: str


DEFAULT_TLS_FLAGS = TLSFlags(
    subject_info_json_flag_name="tls-subject-json",
    common_name_flag_name="tls-common-name",
    org_flag_name="tls-org",
    org_unit_flag_name="tls-org-unit",
    city_flag_name="tls-city",
    state_flag_name="tls-state",
    country_flag_name="tls-country",
)


def first_non_empty(*args: str | None) -> str:
    """Return the first argument that is set and not empty, or an empty string."""
    return next((value for value in args if value), "")


def _decode_subject_json(json_string: str) -> dict[str, str | None]:
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid TLS subject json: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("TLS subject json must be an object")

    fields: dict[str, str | None] = {}
    for key, value in data.items():
        name = key.lower()
        if name not in _JSON_FIELDS:
            continue
        if value is not None and not isinstance(value, str):
            raise ValueError(f"TLS subject field {key!r} must be a string")
        fields[name] = value
    return fields


def parse_or_create_tls_subject_info(json_string: str) -> TLSSubjectInfo:
    """Parse subject JSON, or return an empty subject when the string is empty.

    Fields with two accepted spellings (``org``/``organization``,
    ``org_unit``/``organizational_unit``, ``city``/``locality``,
    ``state``/``province``) take the first non-empty one.
    """
    fields = _decode_subject_json(json_string) if json_string else {}
    return TLSSubjectInfo(
        common_name=fields.get("common_name") or "",
        country=fields.get("country") or "",
        org=first_non_empty(fields.get("org"), fields.get("organization")),
        org_unit=first_non_empty(
            fields.get("org_unit"), fields.get("organizational_unit")
        ),
        city=first_non_empty(fields.get("city"), fields.get("locality")),
        state=first_non_empty(fields.get("state"), fields.get("province")),
    )


def _required_unless_known(
    values: Mapping[str, str | None], name: str, known: str
) -> str:
    if not known:
        return require_string_flag(values, name)
    return values.get(name) or ""


def parse_tls_flags_to_name(
    values: Mapping[str, str | None], tls_flags: TLSFlags
) -> DistinguishedName:
    """Build a certificate distinguished name from subject JSON and flag values.

    Common name and organisation are required, either in the JSON or as flags.
    Flag values override what the JSON gives.
    """
    info = parse_or_create_tls_subject_info(
        values.get(tls_flags.subject_info_json_flag_name) or ""
    )

    common_name = _required_unless_known(
        values, tls_flags.common_name_flag_name, info.common_name
    )
    if common_name:
        info.common_name = common_name

    org = _required_unless_known(values, tls_flags.org_flag_name, info.org)
    if org:
        info.org = org

    overrides = {
        "org_unit": tls_flags.org_unit_flag_name,
        "city": tls_flags.city_flag_name,
        "state": tls_flags.state_flag_name,
        "country": tls_flags.country_flag_name,
    }
    for attribute, flag_name in overrides.items():
        value = values.get(flag_name)
        if value:
            setattr(info, attribute, value)

    return info.distinguished_name()