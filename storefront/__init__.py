"""Storefront catalog pipeline: API client, filtering, pagination and view state."""
