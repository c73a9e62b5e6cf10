"""Calloutline API - command functions and domain models."""
