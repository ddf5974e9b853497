"""Thin, user-facing function wrappers.

Call link generation from notebooks, scripts or report renderers without
importing the internal modules.
"""
