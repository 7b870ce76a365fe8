"""Fluent builder for `FirmRecord`.

A feed parser creates one builder per firm, calls a setter for each field it
reads (in any order, any subset) and finalizes with `build()`. Setters turn
None into an empty string, except for the region code and business name,
which keep None unless the builder was created with `coerce_all_nulls=True`.
"""

from __future__ import annotations

import logging

from firm_records.config import Settings, get_settings
from firm_records.models import FIRM_RECORD_FIELDS, FirmRecord

log = logging.getLogger(__name__)


def _coerce(value: str | None) -> str:
    return value if value is not None else ""


class FirmRecordBuilder:
    """Mutable working storage for one firm record.

    The builder is not terminated by `build()`: it can keep accumulating and
    be finalized again, each call producing an independent record.
    """

    def __init__(self, coerce_all_nulls: bool = False) -> None:
        self.coerce_all_nulls = coerce_all_nulls
        self._values: dict[str, str | None] = dict.fromkeys(FIRM_RECORD_FIELDS, "")

    def _set_raw(self, name: str, value: str | None) -> FirmRecordBuilder:
        self._values[name] = _coerce(value) if self.coerce_all_nulls else value
        return self

    def _set(self, name: str, value: str | None) -> FirmRecordBuilder:
        self._values[name] = _coerce(value)
        return self

    # --------------------------------------------------
    # Regulatory identifiers
    # --------------------------------------------------
    def set_sec_region_code(self, value: str | None) -> FirmRecordBuilder:
        """Set the SEC region code. None is stored as-is by default."""
        return self._set_raw("sec_region_code", value)

    def set_firm_crd_nb(self, value: str | None) -> FirmRecordBuilder:
        return self._set("firm_crd_nb", value)

    def set_sec_nb(self, value: str | None) -> FirmRecordBuilder:
        return self._set("sec_nb", value)

    # --------------------------------------------------
    # Names
    # --------------------------------------------------
    def set_bus_nm(self, value: str | None) -> FirmRecordBuilder:
        """Set the business name. None is stored as-is by default."""
        return self._set_raw("bus_nm", value)

    def set_legal_nm(self, value: str | None) -> FirmRecordBuilder:
        return self._set("legal_nm", value)

    # --------------------------------------------------
    # Address
    # --------------------------------------------------
    def set_street1(self, value: str | None) -> FirmRecordBuilder:
        return self._set("street1", value)

    def set_street2(self, value: str | None) -> FirmRecordBuilder:
        return self._set("street2", value)

    def set_city(self, value: str | None) -> FirmRecordBuilder:
        return self._set("city", value)

    def set_state(self, value: str | None) -> FirmRecordBuilder:
        return self._set("state", value)

    def set_country(self, value: str | None) -> FirmRecordBuilder:
        return self._set("country", value)

    def set_postal_code(self, value: str | None) -> FirmRecordBuilder:
        return self._set("postal_code", value)

    # --------------------------------------------------
    # Contact
    # --------------------------------------------------
    def set_phone_number(self, value: str | None) -> FirmRecordBuilder:
        return self._set("phone_number", value)

    def set_fax_number(self, value: str | None) -> FirmRecordBuilder:
        return self._set("fax_number", value)

    # --------------------------------------------------
    # Classification
    # --------------------------------------------------
    def set_firm_type(self, value: str | None) -> FirmRecordBuilder:
        return self._set("firm_type", value)

    def set_registration_state(self, value: str | None) -> FirmRecordBuilder:
        return self._set("registration_state", value)

    def set_registration_date(self, value: str | None) -> FirmRecordBuilder:
        return self._set("registration_date", value)

    def set_filing_date(self, value: str | None) -> FirmRecordBuilder:
        return self._set("filing_date", value)

    def set_form_version(self, value: str | None) -> FirmRecordBuilder:
        return self._set("form_version", value)

    # --------------------------------------------------
    # Reported metrics
    # --------------------------------------------------
    def set_total_employees(self, value: str | None) -> FirmRecordBuilder:
        return self._set("total_employees", value)

    def set_aum(self, value: str | None) -> FirmRecordBuilder:
        return self._set("aum", value)

    def set_total_accounts(self, value: str | None) -> FirmRecordBuilder:
        return self._set("total_accounts", value)

    # --------------------------------------------------
    # Reference
    # --------------------------------------------------
    def set_brochure_url(self, value: str | None) -> FirmRecordBuilder:
        return self._set("brochure_url", value)

    # --------------------------------------------------
    # Read / finalize
    # --------------------------------------------------
    @property
    def firm_crd_nb(self) -> str:
        """Firm CRD number currently held (needed to key work mid-assembly)."""
        return str(self._values["firm_crd_nb"])

    def build(self) -> FirmRecord:
        """Return a new immutable `FirmRecord` from the current values.

        Raises:
            pydantic.ValidationError: if a setter was given a non-string value.
        """
        record = FirmRecord.model_validate(dict(self._values))
        log.debug(
            "Built firm record crd=%s populated_fields=%d",
            record.firm_crd_nb,
            sum(1 for v in self._values.values() if v),
        )
        return record


def new_builder(settings: Settings | None = None) -> FirmRecordBuilder:
    """Return a builder configured from `Settings` (read from env if omitted)."""
    s = settings or get_settings()
    return FirmRecordBuilder(coerce_all_nulls=s.coerce_all_nulls)
