"""Production adapters implementing application ports."""
