"""Feature modules: static data, matches, player analysis and presentation."""
