"""Packaged resources: grammar fragments and build metadata."""
