"""Report writers for AeroTable sweep tables."""
