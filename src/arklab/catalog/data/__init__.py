"""Bundled agent dataset."""
