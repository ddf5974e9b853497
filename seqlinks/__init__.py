"""Outbound reference links for sequence search hits."""
