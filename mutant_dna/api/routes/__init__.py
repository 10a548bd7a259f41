# mutant_dna/api/routes/__init__.py
