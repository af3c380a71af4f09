"""Presentation helpers that do not depend on a windowing toolkit."""
