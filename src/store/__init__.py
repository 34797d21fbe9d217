"""Output persistence layer.

This package writes normalized CRM import rows to CSV or workbook files.
"""
