"""
Visual Pass Utilities Package

Fetches N2YO visual pass predictions (live or from fixtures), decodes them
into report models and formats them for the web page and the console.
"""

from __future__ import annotations

__all__ = ['client', 'errors', 'formatting', 'models', 'sources']
