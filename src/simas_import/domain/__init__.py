"""Domain layer: reference resolution, identifiers, and the row importer."""
