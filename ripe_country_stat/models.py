"""Immutable records produced while collecting a country's ASNs."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ASNRecord:
    asn: str                # decimal string, e.g. "701"
    org_name: str           # holder / organization name
    prefix_count_4: int     # originated IPv4 prefixes (0 for inactive ASNs)
    prefix_count_6: int     # originated IPv6 prefixes (0 for inactive ASNs)


@dataclass(frozen=True)
class CountryASNSet:
    active_asns: Tuple[str, ...]    # routed, numerically sorted
    inactive_asns: Tuple[str, ...]  # registered but not routed, numerically sorted
    all_asns: Tuple[str, ...]       # active + inactive, numerically sorted

    @property
    def is_empty(self):
        return not self.all_asns
