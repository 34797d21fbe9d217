"""Core constants used across ListPrep modules.

This module centralizes header names, output columns, and tag literals.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("listprep-output")
DEFAULT_OUTPUT_FORMAT = "csv"
SUPPORTED_OUTPUT_FORMATS = ("csv", "xlsx")
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
SUPPORTED_CSV_EXTENSIONS = (".csv",)
SUPPORTED_WORKBOOK_EXTENSIONS = (".xlsx", ".xlsm")
OUTPUT_SHEET_NAME = "CRM Import"

SOURCE_REALTOR = "realtor"
SOURCE_NEIGHBOR = "neighbor"
SOURCE_INVESTOR = "investor"
SUPPORTED_SOURCE_TYPES = (SOURCE_REALTOR, SOURCE_NEIGHBOR, SOURCE_INVESTOR)
DEFAULT_SOURCE_SHEETS = {
    SOURCE_REALTOR: "Realtor Raw",
    SOURCE_NEIGHBOR: "Neighbor Raw",
    SOURCE_INVESTOR: "Investor Raw",
}

AGENT_COMPANY_SEPARATOR = "•"
SKIPPED_AGENT_NAME = "Public Records"
TAG_SEPARATOR = ", "
FACT_SEPARATOR = "\n"

TAG_TYPE_REALTOR = "Type: Realtor"
TAG_TYPE_NEIGHBOR = "Type: Neighbor"
TAG_TYPE_INVESTOR = "Type: Investor"
TAG_TYPE_COMPANY = "Type: Company"
TAG_SOURCE_PROPWIRE = "Source: Propwire"
TAG_COUNTY_PREFIX = "County: "
TAG_STATE_PREFIX = "State: "
INDIVIDUAL_OWNER_TYPES = ("individual", "person")

REALTOR_HEADERS = {
    "agent_name": "Agent's Name",
    "state": "STATE OR PROVINCE",
    "email": "Email Address",
    "mobile_phone": "Mobile Phone Number",
    "address": "ADDRESS",
    "city": "CITY",
    "zip_code": "ZIP OR POSTAL CODE",
}
NEIGHBOR_HEADERS = {
    "company_name": "Company Name",
    "name": "Name",
    "email": "Email",
    "phone_1": "Phone 1",
    "phone_2": "Phone 2",
    "mailing_address": "Mailing Address",
    "property_address": "Property Address",
}
INVESTOR_HEADERS = {
    "email": "Email",
    "phone_1": "Phone 1",
    "phone_2": "Phone 2",
    "phone_3": "Phone 3",
    "owner_type": "Owner Type",
    "owner_first_name": "Owner 1 First Name",
    "owner_last_name": "Owner 1 Last Name",
    "mailing_street": "Owner Mailing Address",
    "mailing_city": "Owner Mailing City",
    "mailing_state": "Owner Mailing State",
    "mailing_zip": "Owner Mailing Zip",
    "county": "County",
    "address": "Address",
    "city": "City",
    "state": "State",
    "zip_code": "Zip",
}

OUTPUT_COLUMNS = (
    "First Name",
    "Last Name",
    "Company Name",
    "Email",
    "Phone 1",
    "Phone 2",
    "Phone 3",
    "Mailing Street",
    "Mailing City",
    "Mailing State",
    "Mailing Zip",
    "Tags",
    "Owned Properties",
    "Realtor - Recently Sold",
    "[DISP] Property Address",
    "[DISP] Property APN",
    "[DISP] Property County",
    "[DISP] Property State",
    "[DISP] Property Acreage",
    "[DISP] Asking Price",
)
MAX_PHONE_COUNT = 3

CAMPAIGN_FIELDS = (
    "street_address_key",
    "campaign_tag",
    "property_address",
    "property_apn",
    "property_county",
    "property_state",
    "property_acreage",
    "property_price",
)
