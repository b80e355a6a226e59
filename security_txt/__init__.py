"""
security.txt - parser for security contact records embedded in program binaries.

    from security_txt import find_and_parse

    record = find_and_parse(program_data)
    print(record)
"""

from security_txt.document import Contact, ContactType, SecurityTxt
from security_txt.errors import (
    DuplicateField,
    EndNotFound,
    InvalidContact,
    InvalidField,
    InvalidSecurityTxtBegin,
    InvalidValue,
    MissingField,
    SecurityTxtError,
    StartNotFound,
    Uneven,
    UnknownField,
)
from security_txt.reader import SecurityTxtReader, find_and_parse, parse, parse_contact
from security_txt.spec import SECURITY_TXT_BEGIN, SECURITY_TXT_END

__version__ = "1.0.0"

__all__ = [
    "Contact",
    "ContactType",
    "SecurityTxt",
    "SecurityTxtReader",
    "find_and_parse",
    "parse",
    "parse_contact",
    "SECURITY_TXT_BEGIN",
    "SECURITY_TXT_END",
    "SecurityTxtError",
    "StartNotFound",
    "EndNotFound",
    "InvalidSecurityTxtBegin",
    "Uneven",
    "InvalidField",
    "InvalidValue",
    "DuplicateField",
    "MissingField",
    "UnknownField",
    "InvalidContact",
]
