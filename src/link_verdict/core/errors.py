"""Custom exceptions for link-verdict."""


class LinkVerdictError(Exception):
    """Base exception for application-level errors."""


class ConfigError(LinkVerdictError):
    """Raised when the YAML config cannot be read, is not a mapping, or holds a
    reference list (popular domains, suspicious TLDs, fraud keywords) that is
    neither a list nor a comma-separated string.

    URL analysis never raises it; only ``load_config`` does.
    """
