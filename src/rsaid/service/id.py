"""
Validation of South African (RSA) national identity numbers.

An ID number is 13 digits laid out as ``YYMMDDSSSSCAZ``:

    YYMMDD  date of birth, century not encoded
    SSSS    sequence number; 5000 and above is male
    C       0 for SA citizens, anything else for permanent residents
    A       reserved, not checked
    Z       check digit

``validate`` never raises for a bad ID number; it returns an ``InvalidIdentity`` holding the reason. The only
exception it raises is ``InvalidArgument`` when it is handed something that is not a string at all.
"""

import logging
import re
import typing as t
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from rsaid.util.config import ValidatorSettings

logger = logging.getLogger(__name__)

ID_LENGTH = 13
GENDER_THRESHOLD = 5000
MAX_PLAUSIBLE_AGE = 122

FORMAT_ERROR = "Invalid ID format: must be exactly 13 digits"
BIRTH_DATE_ERROR = "Invalid birth date in ID"
CHECK_DIGIT_ERROR = "Invalid check digit (Luhn validation failed)"

_ID_PATTERN = re.compile(r"[0-9]{%d}" % ID_LENGTH)
_WHITESPACE = re.compile(r"\s+")

validator_settings = ValidatorSettings()


class InvalidArgument(TypeError):
    """The caller passed something other than a string."""


class InvalidIDNumber(ValueError):
    """Raised by `parse_rsa_id`; the message is the same as `InvalidIdentity.error`."""


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"


class Citizenship(StrEnum):
    SA_CITIZEN = "SA Citizen"
    PERMANENT_RESIDENT = "Permanent Resident"


class IDFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    yy: str
    mm: str
    dd: str
    sequence: str
    citizenship: str
    reserved: str
    check_digit: str


class IDComponents(BaseModel):
    model_config = ConfigDict(frozen=True)

    birth_year: int
    birth_month: int
    birth_day: int
    gender_code: int
    citizenship_code: int


class ValidIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: t.Literal[True] = True
    id_number: str
    date_of_birth: date
    gender: Gender
    citizenship: Citizenship
    check_digit: str
    components: IDComponents


class InvalidIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: t.Literal[False] = False
    error: str


ValidationResult = t.Union[ValidIdentity, InvalidIdentity]


def normalize(id_number: str) -> str:
    """
    Remove all whitespace, including spaces inside the number, eg "900101 4800 085".
    """
    return _WHITESPACE.sub("", id_number.strip())


def is_valid_format(id_number: str) -> bool:
    # Not str.isdigit(), which would also accept non-ASCII digits
    return _ID_PATTERN.fullmatch(id_number) is not None


def extract_fields(id_number: str) -> IDFields:
    return IDFields(
        yy=id_number[0:2],
        mm=id_number[2:4],
        dd=id_number[4:6],
        sequence=id_number[6:10],
        citizenship=id_number[10],
        reserved=id_number[11],
        check_digit=id_number[12],
    )


def calculate_age(year: int, month: int, day: int, reference_date: date) -> int:
    """
    Age in whole years on `reference_date` of someone born on the given day. Negative if they are not born yet, and
    -1 if the date does not exist (eg month 13).
    """
    try:
        birth_date = date(year, month, day)
    except ValueError:
        return -1

    age = reference_date.year - birth_date.year
    if (reference_date.month, reference_date.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def resolve_birth_year(yy: str, mm: str, dd: str, reference_date: date) -> int:
    """
    Pick the century for a two-digit year: the 2000s if that gives a plausible age, then the 1900s. When neither is
    plausible the 1900s are returned and the calendar check rejects the date.
    """
    month, day = int(mm), int(dd)
    candidate_20xx = 2000 + int(yy)
    candidate_19xx = 1900 + int(yy)

    for candidate in (candidate_20xx, candidate_19xx):
        if 0 <= calculate_age(candidate, month, day, reference_date) <= MAX_PLAUSIBLE_AGE:
            return candidate
    return candidate_19xx


def resolve_birth_date(fields: IDFields, reference_date: date) -> t.Optional[date]:
    year = resolve_birth_year(fields.yy, fields.mm, fields.dd, reference_date)
    try:
        return date(year, int(fields.mm), int(fields.dd))
    except ValueError:
        return None


def luhn_check_digit(stem: str) -> int:
    """
    Check digit for the first 12 digits of an ID number.

    Digits at even (0-based) positions are doubled, with 9 subtracted when that goes above 9, then everything is
    summed and the check digit is whatever brings the sum up to a multiple of 10.
    """
    total = 0
    for i, char in enumerate(stem[: ID_LENGTH - 1]):
        digit = int(char)
        if i % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def is_luhn_valid(id_number: str) -> bool:
    return luhn_check_digit(id_number[: ID_LENGTH - 1]) == int(id_number[ID_LENGTH - 1])


def decode_gender(sequence: str) -> Gender:
    return Gender.MALE if int(sequence) >= GENDER_THRESHOLD else Gender.FEMALE


def decode_citizenship(digit: str) -> Citizenship:
    return Citizenship.SA_CITIZEN if digit == "0" else Citizenship.PERMANENT_RESIDENT


def _reject(error: str) -> InvalidIdentity:
    logger.debug("ID number rejected: %s", error)
    return InvalidIdentity(error=error)


def validate(id_number: object, reference_date: t.Optional[date] = None) -> ValidationResult:
    """
    Validate an RSA ID number and decode the details held in it.

    :param id_number: The ID number. Surrounding and embedded whitespace is ignored.
    :param reference_date: "Today" for deciding which century the birth year is in. Defaults to
        `APP_REFERENCE_DATE` if set, otherwise the current date.
    :raises InvalidArgument: If `id_number` is not a string.
    """
    if not isinstance(id_number, str):
        raise InvalidArgument(f"ID must be a string, not {type(id_number).__name__}")

    if reference_date is None:
        reference_date = validator_settings.reference_date or date.today()

    id_number = normalize(id_number)
    if not is_valid_format(id_number):
        return _reject(FORMAT_ERROR)

    try:
        fields = extract_fields(id_number)

        date_of_birth = resolve_birth_date(fields, reference_date)
        if date_of_birth is None:
            return _reject(BIRTH_DATE_ERROR)

        if not is_luhn_valid(id_number):
            return _reject(CHECK_DIGIT_ERROR)

        return ValidIdentity(
            id_number=id_number,
            date_of_birth=date_of_birth,
            gender=decode_gender(fields.sequence),
            citizenship=decode_citizenship(fields.citizenship),
            check_digit=fields.check_digit,
            components=IDComponents(
                birth_year=date_of_birth.year,
                birth_month=date_of_birth.month,
                birth_day=date_of_birth.day,
                gender_code=int(fields.sequence),
                citizenship_code=int(fields.citizenship),
            ),
        )
    except Exception as e:
        logger.exception("Unexpected failure validating ID number")
        return InvalidIdentity(error=f"Validation error: {e}")


def parse_rsa_id(id_number: str, reference_date: t.Optional[date] = None) -> ValidIdentity:
    """
    Parse details from an RSA ID Number, raising `InvalidIDNumber` rather than returning the failure.
    """
    result = validate(id_number, reference_date)
    if isinstance(result, InvalidIdentity):
        raise InvalidIDNumber(result.error)
    return result
