"""Offline order-taking core: query templates, response parsing, request awaiting, view models and screen flows."""

__version__ = "0.1.0"