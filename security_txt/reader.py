"""
security.txt Reader - Locates and parses an embedded security.txt record.

Features:
  - Binary-safe marker search (works on raw program data / ELF dumps)
  - Strict schema: required fields, no duplicates, no unknown fields
  - Trailing bytes after the end marker are ignored
  - Pure: no I/O except the explicit file helper `read()`
"""

from __future__ import annotations

from pathlib import Path

from security_txt.document import Contact, SecurityTxt
from security_txt.errors import (
    DuplicateField,
    EndNotFound,
    InvalidField,
    InvalidSecurityTxtBegin,
    InvalidValue,
    MissingField,
    StartNotFound,
    Uneven,
    UnknownField,
)
from security_txt.spec import BEGIN_BYTES, END_BYTES, FIELD_SEPARATOR, MAX_FILE_SIZE


def _split_list(value: str) -> tuple[str, ...]:
    """Split a comma-separated field, trimming each item. Blank -> empty."""
    if not value.strip():
        return ()
    return tuple(item.strip() for item in value.split(FIELD_SEPARATOR))


class SecurityTxtReader:
    """
    security.txt record reader.

    Usage:
        # Buffer starting with the begin marker
        record = SecurityTxtReader.parse(data)

        # Arbitrary buffer (program data, binary dump)
        record = SecurityTxtReader.find_and_parse(data)

        # File on disk
        record = SecurityTxtReader.read("program.so")
        print(record)
    """

    @staticmethod
    def is_security_txt_bytes(data: bytes) -> bool:
        """Fast check if bytes start with the begin marker."""
        return data.startswith(BEGIN_BYTES)

    @staticmethod
    def contains_security_txt(data: bytes) -> bool:
        """Check if the begin marker appears anywhere in the bytes."""
        return data.find(BEGIN_BYTES) != -1

    @classmethod
    def read(cls, path: str | Path, max_size: int = MAX_FILE_SIZE) -> SecurityTxt:
        """Read a file and parse the first security.txt record inside it."""
        path = Path(path)
        size = path.stat().st_size
        if size > max_size:
            raise ValueError(
                f"File size {size} exceeds maximum of {max_size} bytes: {path}"
            )
        return cls.find_and_parse(path.read_bytes())

    @classmethod
    def find_and_parse(cls, data: bytes) -> SecurityTxt:
        """Locate the begin marker anywhere in `data` and parse from there."""
        start = data.find(BEGIN_BYTES)
        if start == -1:
            raise StartNotFound()
        return cls.parse(data[start:])

    @staticmethod
    def parse_attributes(data: bytes) -> dict[str, str]:
        """
        Decode the raw name/value pairs between the markers.

        `data` must start with the begin marker; anything after the end
        marker is ignored. Returns the attributes in input order without
        checking them against the schema.
        """
        if not data.startswith(BEGIN_BYTES):
            raise InvalidSecurityTxtBegin()

        end = data.find(END_BYTES, len(BEGIN_BYTES))
        if end == -1:
            raise EndNotFound()

        region = data[len(BEGIN_BYTES):end]
        # The last value is NUL terminated too; don't read that as an empty name
        if region.endswith(b"\0"):
            region = region[:-1]
        tokens = region.split(b"\0") if region else []

        attributes: dict[str, str] = {}
        it = iter(tokens)
        for raw_name in it:
            try:
                name = raw_name.decode("utf-8")
            except UnicodeDecodeError:
                raise InvalidField(raw_name) from None
            if name in attributes:
                raise DuplicateField(name)

            raw_value = next(it, None)
            if raw_value is None:
                raise Uneven()
            try:
                value = raw_value.decode("utf-8")
            except UnicodeDecodeError:
                raise InvalidValue(raw_value, name) from None

            attributes[name] = value

        return attributes

    @classmethod
    def parse(cls, data: bytes) -> SecurityTxt:
        """Parse a buffer starting with the begin marker into a SecurityTxt."""
        attributes = cls.parse_attributes(data)

        def required(name: str) -> str:
            if name not in attributes:
                raise MissingField(name)
            return attributes.pop(name)

        name = required("name")
        project_url = required("project_url")
        policy = required("policy")

        contacts = tuple(
            Contact.parse(item.strip())
            for item in required("contacts").split(FIELD_SEPARATOR)
        )
        preferred_languages = _split_list(required("preferred_languages"))

        source_code = attributes.pop("source_code", None)
        expiry = attributes.pop("expiry", None)
        encryption = attributes.pop("encryption", None)
        acknowledgements = attributes.pop("acknowledgements", None)
        auditors = _split_list(attributes.pop("auditors", ""))

        if attributes:
            raise UnknownField(next(iter(attributes)))

        return SecurityTxt(
            name=name,
            project_url=project_url,
            contacts=contacts,
            policy=policy,
            preferred_languages=preferred_languages,
            source_code=source_code,
            expiry=expiry,
            encryption=encryption,
            acknowledgements=acknowledgements,
            auditors=auditors,
        )


# Module-level shortcuts
parse = SecurityTxtReader.parse
find_and_parse = SecurityTxtReader.find_and_parse
parse_contact = Contact.parse
