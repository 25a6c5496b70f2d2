"""Localized page payloads: home, city listings and café details."""
