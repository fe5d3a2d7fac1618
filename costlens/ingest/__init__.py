"""
Ingest Module - Usage File Decoding

Read Azure usage-cost exports into row mappings for the aggregator.
"""

from costlens.ingest.base import UsageRecord
from costlens.ingest.csv_reader import decode_usage_csv, read_usage_csv
from costlens.ingest.demo import demo_rows, write_demo_csv

__all__ = [
    "UsageRecord",
    "read_usage_csv",
    "decode_usage_csv",
    "demo_rows",
    "write_demo_csv",
]
