"""Domain checking utilities."""

from functools import lru_cache

import tldextract

from lap_onboarding.config import get_settings


@lru_cache(maxsize=1)
def _get_extractor() -> tldextract.TLDExtract:
    """Build the public suffix extractor once per process."""
    settings = get_settings()
    if not settings.psl_fetch_remote:
        # Bundled snapshot only, no HTTP request on first use
        return tldextract.TLDExtract(suffix_list_urls=())
    if settings.psl_cache_dir:
        return tldextract.TLDExtract(cache_dir=settings.psl_cache_dir)
    return tldextract.TLDExtract()


def get_sub_domain_for_user(email: str) -> str:
    """Return the host part of an email address.

    Everything after the last "@" is returned, so "p1@it.paypal.com"
    gives "it.paypal.com". A string without "@" is returned unchanged.

    Args:
        email: Email address

    Returns:
        Host part of the address
    """
    return email[email.rfind("@") + 1 :]


def get_registrable_domain(host: str) -> str:
    """Reduce a host name to its registrable domain.

    Uses public suffix list rules, e.g.:
    - sales.paypal.com -> paypal.com
    - a.b.example.co.uk -> example.co.uk

    Args:
        host: DNS host name

    Returns:
        Lowercased registrable domain, or "" if the host has none
    """
    host = host.strip().rstrip(".").lower()
    if not host:
        return ""

    extracted = _get_extractor()(host)
    if extracted.domain and extracted.suffix:
        return f"{extracted.domain}.{extracted.suffix}"
    return ""


def get_domain_for_email(email: str) -> str:
    """Get the registrable domain (TLD) an email address belongs to."""
    return get_registrable_domain(get_sub_domain_for_user(email))
