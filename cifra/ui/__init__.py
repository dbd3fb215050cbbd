"""PyQt5 views for the translation session."""
