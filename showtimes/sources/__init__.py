"""Listing page sources."""
