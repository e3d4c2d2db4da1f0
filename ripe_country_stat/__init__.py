"""
Per-country ASN statistics from RIPEstat and Team Cymru.
"""

__version__ = "0.1.0"
