"""CSV output: one row per ASN, fixed four columns."""

import csv
import io
from pathlib import Path

HEADER = [
    "AS Number",
    "Organization Name",
    "Announced IPv4 Prefix Count",
    "Announced IPv6 Prefix Count",
]


def _write_rows(records, fh):
    writer = csv.writer(fh, lineterminator="\n")
    writer.writerow(HEADER)
    for rec in records:
        writer.writerow([rec.asn, rec.org_name, rec.prefix_count_4, rec.prefix_count_6])


def records_to_csv(records):
    """Render records as CSV text, header first, in the order given."""
    buf = io.StringIO()
    _write_rows(records, buf)
    return buf.getvalue()


def write_csv(records, path):
    """Write records to a UTF-8 CSV file and return its Path."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8", newline="") as f:
        _write_rows(records, f)
    return out_path


def csv_filename(country_code):
    return f"{country_code.upper()}.csv"
