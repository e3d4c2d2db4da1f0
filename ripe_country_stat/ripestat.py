"""
RIPEstat Data API access: country ASN lists, originated prefix counts and
AS holder names.

Every call goes through RipeStatClient.fetch(), which adds the fixed client
parameters and turns HTTP-level failures into TransportError. The
``messages`` array of each response is handed to the run's MessageLog
before any data field is read.
"""

import sys

import requests
from tqdm import tqdm

from ripe_country_stat import __version__
from ripe_country_stat.asn_set import parse_asn_set, sort_asns
from ripe_country_stat.country_codes import country_name, normalize_country_code
from ripe_country_stat.errors import ResolutionError, RipeStatError, TransportError
from ripe_country_stat.models import CountryASNSet

BASE = "https://stat.ripe.net/data"
SOURCE_APP = "ripe-country-stat"
UA = {"User-Agent": f"ripe-country-stat/{__version__}"}
DEFAULT_TIMEOUT = 30


# ═══════════════════════════════════════════════════════════════════════════
# Diagnostic messages
# ═══════════════════════════════════════════════════════════════════════════

def _split_message(message):
    """RIPEstat sends messages as [severity, text] pairs."""
    if not message:
        return "", ""
    severity = str(message[0]).lower()
    text = str(message[1]) if len(message) > 1 else ""
    return severity, text


class MessageLog:
    """
    Handles the ``messages`` array of RIPEstat responses for one run.

    "error" messages abort with RipeStatError. Everything else is printed
    once per (severity, text): "info" to stdout, other severities to stderr.
    """

    def __init__(self):
        self.printed = set()

    def process(self, messages, caller, suppress=False):
        for message in messages or []:
            severity, text = _split_message(message)

            if severity == "error":
                raise RipeStatError(text)
            if suppress:
                continue

            key = (severity, text)
            if key in self.printed:
                continue
            self.printed.add(key)

            line = f"RIPEstat {severity} ({caller}): {text}"
            if severity == "info":
                tqdm.write(line, file=sys.stdout)
            else:
                tqdm.write(line, file=sys.stderr)


def _first_error(payload):
    if not isinstance(payload, dict):
        return None
    for message in payload.get("messages") or []:
        severity, text = _split_message(message)
        if severity == "error":
            return text
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Client
# ═══════════════════════════════════════════════════════════════════════════

class RipeStatClient:
    """
    Sequential RIPEstat client. One instance per run; it owns the
    requests.Session and the MessageLog of that run.
    """

    def __init__(self, timeout=DEFAULT_TIMEOUT, session=None, messages=None):
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.messages = messages if messages is not None else MessageLog()

    def fetch(self, endpoint, resource, **extra):
        """GET <BASE>/<endpoint>/data.json and return the decoded JSON payload."""
        params = {
            "resource": resource,
            "sourceapp": SOURCE_APP,
            "soft_limit": "ignore",
            **extra,
        }
        url = f"{BASE}/{endpoint}/data.json"

        try:
            r = self.session.get(url, params=params, headers=UA, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{endpoint} request for {resource} failed: {e}") from e

        if r.status_code >= 400:
            # RIPEstat explains rejected queries (bad resource etc.) in the body
            try:
                remote_error = _first_error(r.json())
            except ValueError:
                remote_error = None
            if remote_error is not None:
                raise RipeStatError(remote_error)

        try:
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            raise TransportError(f"{endpoint} request for {resource} failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"{endpoint} returned a non-JSON body for {resource}") from e

        if not isinstance(payload, dict):
            raise TransportError(f"{endpoint} returned an unexpected payload for {resource}")
        return payload

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

def _field_asns(country, key):
    value = country.get(key)
    if not isinstance(value, str):
        return []

    asns, errors = parse_asn_set(value)
    if errors:
        first = errors[0]
        print(f"WARNING: malformed {key} ASN set at position {first.position} ({first}); "
              f"kept {len(asns)} ASNs, skipped {len(errors)} entries", file=sys.stderr)
    return sort_asns(asns)


def get_country_asns(client, country_code):
    """
    Fetch the routed (active) and non-routed (inactive) ASNs of a country.

    Missing fields degrade to empty lists. An empty result is valid and left
    for the caller to handle.
    """
    cc = normalize_country_code(country_code)
    name = country_name(cc)
    print(f"Getting ASN list of {name}...")

    payload = client.fetch("country-asns", cc, lod=1)
    client.messages.process(payload.get("messages"), caller="get_country_asns")

    data = payload.get("data")
    countries = (data.get("countries") if isinstance(data, dict) else None) or []
    country = countries[0] if countries and isinstance(countries[0], dict) else {}

    active = _field_asns(country, "routed")
    inactive = _field_asns(country, "non_routed")
    result = CountryASNSet(
        active_asns=tuple(active),
        inactive_asns=tuple(inactive),
        all_asns=tuple(sort_asns(active + inactive)),
    )

    print(f"{name}:")
    print(f"    {len(result.active_asns)} Active ASNs")
    print(f"    {len(result.inactive_asns)} Inactive ASNs")
    print(f"    {len(result.all_asns)} Total ASNs")
    return result


def get_originated_prefix_count(client, asn):
    """Return (ipv4, ipv6) counts of prefixes originated by the ASN."""
    payload = client.fetch("ris-prefixes", asn)
    # the same notices come back for every ASN
    client.messages.process(
        payload.get("messages"), caller="get_originated_prefix_count", suppress=True
    )

    try:
        counts = payload["data"]["counts"]
        v4 = int(counts["v4"]["originating"])
        v6 = int(counts["v6"]["originating"])
    except (KeyError, TypeError, ValueError) as e:
        raise TransportError(f"ris-prefixes returned no originating counts for AS{asn}") from e

    if v4 < 0 or v6 < 0:
        raise TransportError(f"ris-prefixes returned negative counts for AS{asn}: {v4}, {v6}")
    return v4, v6


def get_asn_holder(client, asn):
    """Holder name from as-overview."""
    payload = client.fetch("as-overview", asn)
    client.messages.process(payload.get("messages"), caller="get_asn_holder")

    data = payload.get("data")
    holder = data.get("holder") if isinstance(data, dict) else None
    if not holder:
        raise ResolutionError(f"as-overview has no holder for AS{asn}")
    return holder
