"""
security.txt Document - the parsed, validated record.

    SecurityTxt     <- Required: name, project_url, contacts, policy,
                       preferred_languages
                       Optional: source_code, expiry, encryption,
                       acknowledgements, auditors
    Contact         <- One typed contact method (email, discord, ...)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from security_txt.errors import InvalidContact
from security_txt.spec import CONTACT_SEPARATOR, CONTACT_TYPES


class ContactType(Enum):
    EMAIL = "Email"
    DISCORD = "Discord"
    TELEGRAM = "Telegram"
    TWITTER = "Twitter"
    LINK = "Link"
    OTHER = "Other"

    @classmethod
    def from_tag(cls, tag: str) -> ContactType | None:
        """Case-insensitive lookup of a contact tag. Returns None if unknown."""
        label = CONTACT_TYPES.get(tag.lower())
        if label is None:
            return None
        return cls(label)

    @property
    def tag(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Contact:
    """A single contact method, e.g. Contact(ContactType.EMAIL, "dev@example.com")."""

    type: ContactType
    value: str

    @classmethod
    def parse(cls, text: str) -> Contact:
        """
        Parse a `type:value` contact.

        Exactly one colon is allowed, so `link:https://...` is rejected.
        Whitespace around both halves is trimmed.
        """
        parts = text.split(CONTACT_SEPARATOR)
        if len(parts) != 2:
            raise InvalidContact(text)

        tag, value = parts[0].strip(), parts[1].strip()
        contact_type = ContactType.from_tag(tag)
        if contact_type is None:
            raise InvalidContact(text)

        return cls(type=contact_type, value=value)

    def __str__(self) -> str:
        return f"{self.type.value}: {self.value}"


@dataclass(frozen=True)
class SecurityTxt:
    """Parsed security.txt record. Immutable; list fields are tuples."""

    name: str
    project_url: str
    contacts: tuple[Contact, ...]
    policy: str
    preferred_languages: tuple[str, ...] = ()
    source_code: str | None = None
    expiry: str | None = None
    encryption: str | None = None
    acknowledgements: str | None = None
    auditors: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """JSON-ready representation."""
        return {
            "name": self.name,
            "project_url": self.project_url,
            "contacts": [
                {"type": c.type.tag, "value": c.value} for c in self.contacts
            ],
            "policy": self.policy,
            "preferred_languages": list(self.preferred_languages),
            "source_code": self.source_code,
            "expiry": self.expiry,
            "encryption": self.encryption,
            "acknowledgements": self.acknowledgements,
            "auditors": list(self.auditors),
        }

    def render(self) -> str:
        """Human readable rendering, fixed field order."""
        lines = [
            f"Name: {self.name}",
            f"Project URL: {self.project_url}",
        ]
        if self.expiry is not None:
            lines.append(f"Expires at: {self.expiry}")
        if self.source_code is not None:
            lines.append(f"Source code: {self.source_code}")

        if self.contacts:
            lines += ["", "Contacts:"]
            lines += [f"  {contact}" for contact in self.contacts]

        if self.preferred_languages:
            lines += ["", "Preferred Languages:"]
            lines += [f"  {lang}" for lang in self.preferred_languages]

        if self.encryption is not None:
            lines += ["", "Encryption:", self.encryption]

        if self.acknowledgements is not None:
            lines += ["", "Acknowledgements:", self.acknowledgements]

        if self.auditors:
            lines += ["", "Auditors:"]
            lines += [f"  {auditor}" for auditor in self.auditors]

        lines += ["", "Policy:", self.policy]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
