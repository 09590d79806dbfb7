"""SnapThePlant test suite."""
