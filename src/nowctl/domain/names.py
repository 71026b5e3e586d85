"""Domain name validation.

Two failure modes, both raised as :class:`InvalidDomain`:

- the string is not a syntactically valid host name;
- the string is valid but has no registrable label in front of its
  public suffix (``com``, ``co.uk``, ``localhost``).

A TLD missing from the Public Suffix List is still accepted: its last
label is taken as the suffix. One trailing dot is ignored.

Lookups use the Public Suffix List snapshot bundled with ``tldextract``;
no network or filesystem access happens here.
"""

from __future__ import annotations

import re

import tldextract
from pydantic import BaseModel

MAX_NAME_LENGTH = 253
MAX_LABEL_LENGTH = 63

_LABEL_RE = re.compile(r"^[a-z0-9-]+$")

_extract = tldextract.TLDExtract(
    cache_dir=None,
    suffix_list_urls=(),
    include_psl_private_domains=True,
)


class InvalidDomain(ValueError):
    """Raised when a domain argument cannot be used."""

    def __init__(self, domain: str, message: str) -> None:
        super().__init__(message)
        self.domain = domain
        self.message = message


class ParsedDomain(BaseModel):
    """A domain argument split at the registrable-domain boundary."""

    model_config = {"frozen": True}

    domain: str
    subdomain: str | None = None


def _syntax_error(name: str) -> bool:
    """Return True if *name* is not a well-formed host name."""
    if not name or len(name) > MAX_NAME_LENGTH:
        return True
    try:
        ascii_name = name.encode("idna").decode("ascii").lower()
    except UnicodeError:
        return True
    for label in ascii_name.split("."):
        if not label or len(label) > MAX_LABEL_LENGTH:
            return True
        if label.startswith("-") or label.endswith("-"):
            return True
        if not _LABEL_RE.match(label):
            return True
    return False


def parse_domain(raw: str) -> ParsedDomain:
    """Split *raw* into its registrable domain and subdomain.

    Raises:
        InvalidDomain: If *raw* is malformed or has no registrable domain.
    """
    name = raw[:-1] if raw.endswith(".") else raw
    if _syntax_error(name):
        raise InvalidDomain(raw, f"The provided domain name {raw} is invalid.")

    host = name.lower()
    parts = _extract(host)
    if parts.suffix:
        if not parts.domain:
            raise InvalidDomain(raw, f"The provided domain '{raw}' is not valid.")
        return ParsedDomain(
            domain=f"{parts.domain}.{parts.suffix}",
            subdomain=parts.subdomain or None,
        )

    # No listed suffix: the last label is the TLD (the PSL default "*" rule).
    labels = host.split(".")
    if len(labels) < 2:
        raise InvalidDomain(raw, f"The provided domain '{raw}' is not valid.")
    return ParsedDomain(
        domain=".".join(labels[-2:]),
        subdomain=".".join(labels[:-2]) or None,
    )
