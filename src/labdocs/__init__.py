"""Labdocs - static documentation site for the Data Science Lab."""
