"""Blogforge: page generation for a markdown blog."""

__version__ = "0.1.0"
