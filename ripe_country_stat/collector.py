"""
Drives the per-ASN lookups for a country and assembles the final records.

Active ASNs get a name and their originated prefix counts; inactive ASNs
only get a name, their counts are 0/0 since nothing is announced for them.
"""

from tqdm import tqdm

from ripe_country_stat.models import ASNRecord
from ripe_country_stat.ripestat import get_originated_prefix_count


def collect_records(country_asns, client, name_resolver, show_progress=True):
    """
    Resolve every ASN of a CountryASNSet, one at a time.

    Any lookup error aborts the whole collection; no partial list is returned.
    """
    records = []

    with tqdm(total=len(country_asns.all_asns), unit="ASN", disable=not show_progress) as bar:
        for asn in country_asns.active_asns:
            org_name = name_resolver.resolve(asn)
            v4, v6 = get_originated_prefix_count(client, asn)
            records.append(ASNRecord(asn, org_name, v4, v6))
            bar.update(1)

        for asn in country_asns.inactive_asns:
            org_name = name_resolver.resolve(asn)
            records.append(ASNRecord(asn, org_name, 0, 0))
            bar.update(1)

    # two ascending runs, merge them into one
    return sorted(records, key=lambda rec: int(rec.asn))
