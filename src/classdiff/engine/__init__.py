"""Comparison engine: extraction, structural and implementation diffing."""
