"""Athena gateway service."""
