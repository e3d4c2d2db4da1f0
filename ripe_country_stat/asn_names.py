"""
ASN to organization name resolution.

Two interchangeable resolvers, both exposing ``resolve(asn) -> str``:

  - CymruNameResolver: TXT query of AS<asn>.asn.cymru.com (default)
  - RipeStatNameResolver: RIPEstat as-overview holder

Team Cymru answers with a single pipe-delimited record:

    "701 | US | arin | 1990-08-03 | UUNET - MCI Communications Services, Inc. d/b/a Verizon Business, US"

The AS name is the 5th field, ending in a ", CC" country tag that is cut off.
"""

import dns.exception
import dns.resolver

from ripe_country_stat.errors import ResolutionError
from ripe_country_stat.ripestat import DEFAULT_TIMEOUT, get_asn_holder

CYMRU_SUFFIX = "asn.cymru.com"
DNS_SERVERS = [
    "1.1.1.1",
    "1.0.0.1",
    "2606:4700:4700::1111",
    "2606:4700:4700::1001",
    "9.9.9.9",
]
COUNTRY_TAG_LENGTH = 4  # ", US"
NAME_SOURCES = ("dns", "ripestat")


def parse_cymru_txt(txt, asn=None):
    """Organization name from an AS<asn>.asn.cymru.com TXT record."""
    label = f"AS{asn}" if asn is not None else "ASN"
    fields = [f.strip() for f in txt.strip().split("|", 4)]
    if len(fields) < 5:
        raise ResolutionError(f"Malformed Team Cymru record for {label}: {txt!r}")
    if len(fields[4]) <= COUNTRY_TAG_LENGTH:
        raise ResolutionError(f"Team Cymru record for {label} has no AS name: {txt!r}")

    name = fields[4][:-COUNTRY_TAG_LENGTH].rstrip()
    if not name:
        raise ResolutionError(f"Team Cymru record for {label} has no AS name: {txt!r}")
    return name


class CymruNameResolver:
    """Team Cymru WHOIS-over-DNS, queried through a fixed set of public resolvers."""

    def __init__(self, timeout=DEFAULT_TIMEOUT, nameservers=None, resolver=None):
        if resolver is None:
            resolver = dns.resolver.Resolver(configure=False)
            resolver.nameservers = list(nameservers or DNS_SERVERS)
            resolver.lifetime = timeout
        self.resolver = resolver

    def query_txt(self, asn):
        qname = f"AS{asn}.{CYMRU_SUFFIX}"
        try:
            answer = self.resolver.resolve(qname, "TXT")
        except dns.exception.DNSException as e:
            raise ResolutionError(f"TXT lookup of {qname} failed: {e}") from e

        for rdata in answer:
            return b"".join(rdata.strings).decode("utf-8", errors="replace")
        raise ResolutionError(f"TXT lookup of {qname} returned no records")

    def resolve(self, asn):
        return parse_cymru_txt(self.query_txt(asn), asn)


class RipeStatNameResolver:
    """Holder names from RIPEstat as-overview, one HTTP request per ASN."""

    def __init__(self, client):
        self.client = client

    def resolve(self, asn):
        return get_asn_holder(self.client, asn)


def make_name_resolver(source, client, timeout=DEFAULT_TIMEOUT):
    if source == "dns":
        return CymruNameResolver(timeout=timeout)
    if source == "ripestat":
        return RipeStatNameResolver(client)
    raise ValueError(f"Unknown name source: {source!r} (expected one of {', '.join(NAME_SOURCES)})")
