"""Hostname extraction and path/query recovery."""

from __future__ import annotations

from dataclasses import dataclass
import ipaddress
import re
from urllib.parse import unquote, urlsplit

SCHEME_PATTERN = re.compile(r"^[a-zA-Z]+://")
DEFAULT_SCHEME = "http://"

# Schemes whose authority and path treat "\" as "/", as browsers do.
SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

# C0 controls and space are trimmed from both ends; tab and newlines vanish anywhere.
_EDGE_TRIM = "".join(chr(code) for code in range(0x21))
_STRIPPED_ANYWHERE = re.compile(r"[\t\n\r]")

# Code points a browser URL parser refuses inside a host.
FORBIDDEN_HOST_CHARS = frozenset('#%/:<>?@[\\]^|"')


@dataclass(frozen=True)
class ParsedUrl:
    raw: str
    hostname: str
    path: str = ""
    query: str = ""
    has_query: bool = False

    @property
    def path_and_query(self) -> str:
        if self.has_query or self.query:
            return f"{self.path}?{self.query}"
        return self.path


def has_scheme(url: str) -> bool:
    return SCHEME_PATTERN.match(url or "") is not None


def _valid_host(host: str) -> bool:
    if not host:
        return False
    return not any(ch.isspace() or ch in FORBIDDEN_HOST_CHARS for ch in host)


def _prepare(raw: str) -> str:
    candidate = raw if has_scheme(raw) else DEFAULT_SCHEME + raw
    candidate = _STRIPPED_ANYWHERE.sub("", candidate.strip(_EDGE_TRIM))
    scheme, _, rest = candidate.partition("://")
    if scheme.lower() not in SPECIAL_SCHEMES:
        return candidate
    # Only the authority and path are rewritten; the query keeps its backslashes.
    cut = min((i for i in (rest.find("?"), rest.find("#")) if i >= 0), default=len(rest))
    head = rest[:cut].replace("\\", "/")
    return f"{scheme}://{head}{rest[cut:]}"


def _host_from(netloc: str, hostname: str) -> str | None:
    if netloc.rpartition("@")[2].startswith("["):
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError:
            return None
        return f"[{hostname.lower()}]"
    host = unquote(hostname).lower()
    return host if _valid_host(host) else None


def parse_url(url: str) -> ParsedUrl | None:
    """Split ``url`` into hostname, path and query.

    A default ``http://`` scheme is prepended when the text has none. Returns
    ``None`` when no usable hostname can be recovered. IPv6 hosts keep their
    brackets.
    """

    raw = url or ""
    candidate = _prepare(raw)
    try:
        parts = urlsplit(candidate)
        # Accessing ``port`` validates it; an out-of-range or non-numeric port is fatal.
        parts.port
    except ValueError:
        return None

    host = _host_from(parts.netloc, parts.hostname or "")
    if host is None:
        return None
    return ParsedUrl(
        raw=raw,
        hostname=host,
        path=parts.path,
        query=parts.query,
        has_query="?" in candidate.partition("#")[0],
    )


def extract_hostname(url: str) -> str | None:
    parsed = parse_url(url)
    return parsed.hostname if parsed else None
