"""
Command line entry point: pick a country, collect its ASN stats, write <CC>.csv.

Usage:
    ripe-country-stat
    ripe-country-stat --country TR
    ripe-country-stat --country tr --name-source ripestat --output-dir out/
"""

import argparse
import sys
import traceback
from pathlib import Path

from ripe_country_stat import __version__
from ripe_country_stat.asn_names import NAME_SOURCES, make_name_resolver
from ripe_country_stat.collector import collect_records
from ripe_country_stat.country_codes import (
    COUNTRY_CODES,
    code_for_name,
    is_valid_country_code,
    normalize_country_code,
)
from ripe_country_stat.errors import RipeStatError, ValidationError
from ripe_country_stat.export import csv_filename, write_csv
from ripe_country_stat.ripestat import DEFAULT_TIMEOUT, RipeStatClient, get_country_asns

METHOD_CODE = "Enter ISO-3166-1 alpha-2 code"
METHOD_LIST = "Select from list"


# ═══════════════════════════════════════════════════════════════════════════
# Arguments & prompts
# ═══════════════════════════════════════════════════════════════════════════

def _country_arg(value):
    try:
        return normalize_country_code(value)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="ripe-country-stat",
        description="Get the IP prefix count stats for any country.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--country", type=_country_arg,
                        help="ISO-3166-1 alpha-2 code, skips the interactive prompts")
    parser.add_argument("--name-source", choices=NAME_SOURCES, default="dns",
                        help="Where organization names come from (default: dns, Team Cymru)")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help=f"Per-request HTTP/DNS timeout in seconds (default: {DEFAULT_TIMEOUT})")
    parser.add_argument("-o", "--output-dir", default=".",
                        help="Directory for <CC>.csv (default: current directory)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    return parser.parse_args(argv)


def prompt_country(input_fn=None):
    """Ask for a country interactively and return its upper-case code."""
    input_fn = input_fn or input
    print("How do you want to select the country?")
    print(f"  1) {METHOD_CODE}")
    print(f"  2) {METHOD_LIST}")
    while True:
        choice = input_fn("Choice [1]: ").strip() or "1"
        if choice in ("1", "2"):
            break
        print("  Please answer 1 or 2.")

    if choice == "1":
        while True:
            code = input_fn("Please enter the ISO-3166-1 alpha-2 code: ")
            if is_valid_country_code(code):
                return normalize_country_code(code)
            print(f"  Unknown country code: {code.strip()!r}")

    names = list(COUNTRY_CODES.values())
    for idx, name in enumerate(names, 1):
        print(f"  {idx:3d}) {name}")
    while True:
        answer = input_fn("Please select the country (number): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(names):
            return code_for_name(names[int(answer) - 1])
        print(f"  Please enter a number between 1 and {len(names)}.")


# ═══════════════════════════════════════════════════════════════════════════
# Run
# ═══════════════════════════════════════════════════════════════════════════

def run(country, name_source="dns", timeout=DEFAULT_TIMEOUT, output_dir=".", show_progress=True):
    """Fetch, resolve and write one country. Returns the process exit code."""
    country = normalize_country_code(country)

    with RipeStatClient(timeout=timeout) as client:
        country_asns = get_country_asns(client, country)
        if country_asns.is_empty:
            print("No ASNs found, quitting...")
            return 0

        print("This process may take quite a while (and may even error) depending on country, "
              "get a coffee and do something else while this is running.")
        name_resolver = make_name_resolver(name_source, client, timeout=timeout)
        records = collect_records(country_asns, client, name_resolver, show_progress=show_progress)

    out_path = write_csv(records, Path(output_dir) / csv_filename(country))
    print(f"\nProcessed {len(records)} ASNs.")
    print(f'Saved to "{out_path.name}".')
    return 0


def _flush():
    sys.stdout.flush()
    sys.stderr.flush()


def main(argv=None):
    """Entry point for console_scripts."""
    args = parse_args(argv)

    try:
        country = args.country or prompt_country()
        code = run(
            country,
            name_source=args.name_source,
            timeout=args.timeout,
            output_dir=args.output_dir,
            show_progress=not args.no_progress,
        )
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        code = 130
    except EOFError:
        print("\nERROR: no input for the country prompt, use --country when stdin is not a terminal.",
              file=sys.stderr)
        code = 1
    except RipeStatError as e:
        print(f"\n\nRIPEstat error: {e.message}", file=sys.stderr)
        code = 0
    except Exception:
        print("\n\nAn error occurred!\n", file=sys.stderr)
        traceback.print_exc()
        code = 1

    _flush()
    return code


if __name__ == "__main__":
    sys.exit(main())
