"""Rendering adapters; the core never draws."""
