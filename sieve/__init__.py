"""
SIEVE - Staffing-request Intake and Entity Extraction

A heuristic pipeline that turns loosely formatted staffing requests (plain text
exported from word-processing documents) into partially structured data.

Architecture:
- Intake Context: Text normalization and section splitting
- Extraction Context: Pattern matching, entity classification, field extraction
"""

__version__ = "0.1.0"
