"""
security.txt Format Specification V1
====================================

Layout:
    =======BEGIN SECURITY.TXT V1=======\\0   <- Begin marker (NUL terminated)
    name\\0<value>\\0                         <- Field name, then field value
    project_url\\0<value>\\0
    contacts\\0<type:value, ...>\\0
    ...
    =======END SECURITY.TXT V1=======\\0     <- End marker (NUL terminated)

Design Decisions:
    - Markers are plain ASCII so the record is visible to `strings` on a binary
    - Fields are NUL-terminated UTF-8, alternating name / value
    - Field names are unique, unknown names are rejected
    - List fields are comma-separated, contacts are `type:value`
    - The record may sit anywhere in a larger binary (program data, ELF section)
"""

# Marker strings - the record lives between these two
SECURITY_TXT_BEGIN = "=======BEGIN SECURITY.TXT V1=======\0"
SECURITY_TXT_END = "=======END SECURITY.TXT V1=======\0"

BEGIN_BYTES = SECURITY_TXT_BEGIN.encode("ascii")
END_BYTES = SECURITY_TXT_END.encode("ascii")

# Format version
FORMAT_VERSION = "V1"

# ELF section the encoder places the record into
SECTION_NAME = ".security.txt"

# Fields the parser insists on. preferred_languages is described as optional
# in the published field list but has always been enforced by the parser.
REQUIRED_FIELDS = {
    "name": "Name of the project",
    "project_url": "URL of the project",
    "contacts": "Comma-separated list of type:value contacts",
    "policy": "Security policy text or URL",
    "preferred_languages": "Comma-separated list of ISO 639-1 language codes",
}

OPTIONAL_FIELDS = {
    "source_code": "URL of the project's source code",
    "expiry": "Date after which the information should be considered stale",
    "encryption": "PGP key or URL to one",
    "auditors": "Comma-separated list of auditors",
    "acknowledgements": "Hall of fame text or URL",
}

KNOWN_FIELDS = {**REQUIRED_FIELDS, **OPTIONAL_FIELDS}

# Contact tag (matched case-insensitively) -> display label
CONTACT_TYPES = {
    "email": "Email",
    "discord": "Discord",
    "telegram": "Telegram",
    "twitter": "Twitter",
    "link": "Link",
    "other": "Other",
}

FIELD_SEPARATOR = ","
CONTACT_SEPARATOR = ":"

# Upper bound for file-based reads (program binaries are well below this)
MAX_FILE_SIZE = 64 * 1024 * 1024
