# mutant_dna/cli/commands/__init__.py
