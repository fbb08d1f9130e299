"""
Intake Context

Responsibilities:
- Canonicalizes raw request text (line endings, whitespace, bullets, numbering)
- Splits normalized text into meta block, description and numbered items
- Detects and fills gaps in item numbering

Owns: Normalization and segmentation logic
Never: Interprets field values or classifies terms
"""
