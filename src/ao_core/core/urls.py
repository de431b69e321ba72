"""URL scheme guard for plugin boundaries."""

from __future__ import annotations

from ao_core.core.config import log_event

ALLOWED_SCHEMES = ("https://", "http://")


class InvalidUrlError(ValueError):
    """Raised when a URL is not http(s)."""

    def __init__(self, url: str, label: str):
        self.url = url
        self.label = label
        super().__init__(f'[{label}] Invalid url: must be http(s), got "{url}"')


def validate_url(url: str, label: str) -> None:
    """Check that url starts with http:// or https://.

    The check is a case-sensitive prefix match. Raises InvalidUrlError,
    naming the plugin label and the offending url, otherwise.
    """
    if not url.startswith(ALLOWED_SCHEMES):
        log_event("warning", "url_rejected", url=url, label=label)
        raise InvalidUrlError(url, label)
