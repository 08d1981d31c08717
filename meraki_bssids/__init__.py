"""Export Meraki access point BSSIDs to a Teams LIS import workbook."""

__version__ = "1.0.0"
