"""Application – filter resolution, predicate building, pagination and catalog ports."""
