# mutant_dna/api/__init__.py
"""REST API for mutant-dna (FastAPI)."""
