"""
Parser for the ASN set literals RIPEstat embeds in country-asns responses.

The ``routed`` and ``non_routed`` fields hold the textual form of a set of
ASN objects rather than a JSON array:

    {AsnSingle(701), AsnSingle(702)}

Grammar accepted here:

    set    := 'set()' | '' | '{' [entry (',' ws? entry)*] ','? ws? '}'
    entry  := ws? 'AsnSingle(' digits ')'

Entries that do not match are skipped up to the next ',' or '}' and
reported as ASNSetParseError values next to the ASNs that did parse.
"""

from ripe_country_stat.errors import ASNSetParseError

EMPTY_SET = "set()"
ENTRY_OPEN = "AsnSingle("
DIGITS = "0123456789"


def _skip_spaces(text, pos):
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


def _skip_to_separator(text, pos):
    while pos < len(text) and text[pos] not in ",}":
        pos += 1
    return pos


def _parse_entry(text, pos):
    """Parse one AsnSingle(<digits>) starting at pos. Returns (asn, new_pos)."""
    if not text.startswith(ENTRY_OPEN, pos):
        raise ASNSetParseError(text, pos, f"expected {ENTRY_OPEN!r}")
    pos += len(ENTRY_OPEN)

    start = pos
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    if pos == start:
        raise ASNSetParseError(text, pos, "expected ASN digits")
    if pos >= len(text) or text[pos] != ")":
        raise ASNSetParseError(text, pos, "expected ')'")

    return str(int(text[start:pos])), pos + 1


def parse_asn_set(text):
    """
    Extract the ASNs of a set literal, in source order.

    Returns (asns, errors). None, an empty string and ``set()`` all mean
    "no ASNs". Duplicates are kept as they appear in the source. A
    malformed entry does not stop the scan: it lands in ``errors`` and the
    following entries are still read.
    """
    asns = []
    errors = []
    if text is None:
        return asns, errors
    text = text.strip()
    if text in ("", EMPTY_SET):
        return asns, errors

    if text[0] != "{":
        errors.append(ASNSetParseError(text, 0, "expected '{'"))
        return asns, errors

    pos = _skip_spaces(text, 1)
    while pos < len(text) and text[pos] != "}":
        try:
            asn, pos = _parse_entry(text, pos)
            asns.append(asn)
        except ASNSetParseError as e:
            errors.append(e)
            pos = _skip_to_separator(text, pos)

        pos = _skip_spaces(text, pos)
        if pos < len(text) and text[pos] not in ",}":
            errors.append(ASNSetParseError(text, pos, "expected ',' or '}'"))
            pos = _skip_to_separator(text, pos)
        if pos < len(text) and text[pos] == ",":
            pos = _skip_spaces(text, pos + 1)

    if pos >= len(text):
        errors.append(ASNSetParseError(text, pos, "unterminated set"))
    elif pos != len(text) - 1:
        errors.append(ASNSetParseError(text, pos + 1, "trailing characters after '}'"))

    return asns, errors


def sort_asns(asns):
    """Numeric ascending sort of ASN strings ("9" before "10")."""
    return sorted(asns, key=int)
