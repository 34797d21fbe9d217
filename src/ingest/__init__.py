"""Raw contact list ingestion.

This package reads raw exports, resolves their headers, and validates the
campaign context before rows reach the aggregation transforms.
"""
