"""Personal budget dashboard backend: savings and PEA projections."""
