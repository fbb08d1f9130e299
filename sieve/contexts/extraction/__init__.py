"""
Extraction Context

Responsibilities:
- Matches named patterns (dates, identifiers, levels, quantities, locations)
  with fixed per-pattern confidences
- Parses the "CV - ..." tracking line
- Finds dictionary terms and classifies them as required / preferred / leadership
- Extracts typed fields from numbered request items

Owns: Pattern registry, entity dictionaries, classification rules
Never: Normalizes or re-splits text (consumes Intake output as-is)
"""
