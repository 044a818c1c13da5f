"""Application services for the coverage window domain."""
