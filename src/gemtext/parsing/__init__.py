"""Gemtext line classification and the typed page model.

Submodules:
  lines   -- Line variants (Text, Link, Pre, Heading, ListItem, Quote) and Page
  parser  -- line splitting and the per-line classifier
"""
