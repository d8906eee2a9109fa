"""Concrete implementations of the abstract interfaces."""
