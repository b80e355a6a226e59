import pytest

from security_txt.spec import BEGIN_BYTES, END_BYTES


def encode(*pairs: tuple[str, str]) -> bytes:
    """Lay out name/value pairs the way the security_txt! macro does."""
    body = b"".join(
        name.encode("utf-8") + b"\0" + value.encode("utf-8") + b"\0"
        for name, value in pairs
    )
    return BEGIN_BYTES + body + END_BYTES


MINIMAL_FIELDS = [
    ("name", "Test"),
    ("project_url", "http://x"),
    ("contacts", "email:a@b.com"),
    ("policy", "See docs"),
    ("preferred_languages", "en"),
]

FULL_FIELDS = [
    ("name", "Example Program"),
    ("project_url", "https://example.com"),
    ("contacts", "email:security@example.com, discord:example#1234, Link:example.com/security"),
    ("policy", "https://example.com/SECURITY.md"),
    ("preferred_languages", "en, de"),
    ("source_code", "https://github.com/example/program"),
    ("expiry", "2030-01-01"),
    ("encryption", "-----BEGIN PGP PUBLIC KEY BLOCK-----\nabc\n-----END PGP PUBLIC KEY BLOCK-----"),
    ("acknowledgements", "Thanks to everyone who reported bugs"),
    ("auditors", "Neodyme, OtterSec"),
]


@pytest.fixture
def minimal_bytes():
    return encode(*MINIMAL_FIELDS)


@pytest.fixture
def full_bytes():
    return encode(*FULL_FIELDS)


@pytest.fixture(name="encode")
def encode_fixture():
    return encode
