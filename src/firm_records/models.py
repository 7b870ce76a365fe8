"""Pydantic model for a finalized firm record.

Every field is textual and defaults to an empty string. Field aliases carry
the column labels used by the IAPD firm feed so records can be populated
from either naming.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ConfigDict


class FirmRecord(BaseModel):
    """Immutable snapshot of a regulated firm's descriptive and filing data.

    Attributes:
        sec_region_code: SEC regional office code. May be None when set
            through the builder without coercion.
        firm_crd_nb: Central Registration Depository number of the firm.
        sec_nb: SEC file number (e.g. '801-12345').
        bus_nm: Business name. May be None, like `sec_region_code`.
        legal_nm: Legal name.
        street1: First street line of the main office.
        street2: Second street line of the main office.
        city: Main office city.
        state: Main office state.
        country: Main office country.
        postal_code: Main office postal code.
        phone_number: Main office phone number.
        fax_number: Main office fax number.
        firm_type: Registration type of the firm.
        registration_state: Jurisdiction of the registration.
        registration_date: Registration date, as reported.
        filing_date: Date of the latest Form ADV filing, as reported.
        form_version: Form ADV version of the filing.
        total_employees: Total employees, as reported.
        aum: Regulatory assets under management, as reported.
        total_accounts: Total number of accounts, as reported.
        brochure_url: URL of the firm's Part 2 brochure.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    # Regulatory identifiers
    sec_region_code: str | None = Field(default="", alias="SECRgnCD")
    firm_crd_nb: str = Field(default="", alias="FirmCrdNb")
    sec_nb: str = Field(default="", alias="SECNb")

    # Names
    bus_nm: str | None = Field(default="", alias="BusNm")
    legal_nm: str = Field(default="", alias="LegalNm")

    # Address
    street1: str = Field(default="", alias="Street1")
    street2: str = Field(default="", alias="Street2")
    city: str = Field(default="", alias="City")
    state: str = Field(default="", alias="State")
    country: str = Field(default="", alias="Country")
    postal_code: str = Field(default="", alias="PostalCode")

    # Contact
    phone_number: str = Field(default="", alias="PhoneNumber")
    fax_number: str = Field(default="", alias="FaxNumber")

    # Classification
    firm_type: str = Field(default="", alias="FirmType")
    registration_state: str = Field(default="", alias="RegistrationState")
    registration_date: str = Field(default="", alias="RegistrationDate")
    filing_date: str = Field(default="", alias="FilingDate")
    form_version: str = Field(default="", alias="FormVersion")

    # Reported metrics
    total_employees: str = Field(default="", alias="TotalEmployees")
    aum: str = Field(default="", alias="AUM")
    total_accounts: str = Field(default="", alias="TotalAccounts")

    # Reference
    brochure_url: str = Field(default="", alias="BrochureURL")


FIRM_RECORD_FIELDS: tuple[str, ...] = tuple(FirmRecord.model_fields)

FIRM_RECORD_LABELS: dict[str, str] = {
    name: str(info.alias) for name, info in FirmRecord.model_fields.items()
}
