"""Provenance resolution core — locator, matcher, resolver and host action."""
