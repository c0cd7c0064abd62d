"""Core scaffolding pipeline for create-specra."""
