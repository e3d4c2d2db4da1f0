#!/usr/bin/env python3
"""
Fetch every ASN registered to a country from RIPEstat, resolve holder names
(Team Cymru DNS) and originated prefix counts, and save them to <CC>.csv.

Requires the package to be installed (pip install -e .).

Usage:
    python3 scripts/fetch_country_asns.py
    python3 scripts/fetch_country_asns.py --country BD
    python3 scripts/fetch_country_asns.py --country BD --name-source ripestat -o data/
"""

import sys

from ripe_country_stat.cli import main

if __name__ == "__main__":
    sys.exit(main())
