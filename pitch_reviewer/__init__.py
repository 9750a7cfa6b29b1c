"""
Pitch Reviewer - structured assessment of LATAM pitch-deck reviews

Turns a bilingual (Spanish/English) markdown review of a pitch deck into a
structured, enriched data model and ranks a catalog of early-stage investors
against the assessed startup.

Architecture:
- Intake Context: Locale resolution, review table parsing, deck context inference
- Assessment Context: Lane enrichment, summary bullets, key facts, structural gaps
- Matching Context: Investor catalog and ranking
- Session Context: History and upload counter state owned by the boundary layer
"""

__version__ = "0.1.0"
