# mutant_dna/api/models/__init__.py
