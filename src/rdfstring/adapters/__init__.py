"""Adapters connecting the term codec to external RDF libraries."""
