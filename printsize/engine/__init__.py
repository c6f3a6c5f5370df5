"""Calculation engine: resolution, print size and format compatibility."""
