"""Radar ingestion pipeline.

This package retrieves tabular sources, validates and sanitizes them,
and assembles the immutable radar model.
"""
