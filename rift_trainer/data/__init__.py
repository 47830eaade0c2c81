"""Catalog data: models, snapshot loaders and the catalog facade."""
