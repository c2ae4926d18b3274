"""Static food reference data."""
