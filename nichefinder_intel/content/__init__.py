"""Editorial content loaders (integration description table)."""
