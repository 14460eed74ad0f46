"""Postcraft - LinkedIn post generation with Gemini, seeded from AI news."""

__version__ = "0.1.0"
