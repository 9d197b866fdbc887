"""Thin wrappers around the external tools the pipeline drives."""
