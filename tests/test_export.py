import csv

from ripe_country_stat.export import HEADER, csv_filename, records_to_csv, write_csv
from ripe_country_stat.models import ASNRecord


def test_header_and_column_order():
    text = records_to_csv([ASNRecord("701", "UUNET", 1200, 35)])
    assert text == (
        "AS Number,Organization Name,Announced IPv4 Prefix Count,Announced IPv6 Prefix Count\n"
        "701,UUNET,1200,35\n"
    )


def test_comma_in_name_is_quoted():
    text = records_to_csv([ASNRecord("1", "Acme, Inc.", 0, 0)])
    assert text.splitlines()[1] == '1,"Acme, Inc.",0,0'


def test_quotes_and_newlines_are_escaped():
    text = records_to_csv([ASNRecord("2", 'The "Best" ISP\nLtd', 3, 0)])
    assert '"The ""Best"" ISP\nLtd"' in text


def test_empty_record_list_still_has_header():
    assert records_to_csv([]) == ",".join(HEADER) + "\n"


def test_write_csv_utf8(tmp_path):
    records = [
        ASNRecord("9121", "TTNET", 400, 12),
        ASNRecord("34984", "TELLCOM İLETİŞİM HİZMETLERİ A.Ş.", 80, 3),
    ]
    out = write_csv(records, tmp_path / "out" / csv_filename("tr"))

    assert out.name == "TR.csv"
    with open(out, encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == HEADER
    assert rows[2] == ["34984", "TELLCOM İLETİŞİM HİZMETLERİ A.Ş.", "80", "3"]
