"""Credential hashing adapters."""
