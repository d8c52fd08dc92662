"""Localization: locale bundles and lookup."""
