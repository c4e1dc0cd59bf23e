"""
post-card

Renders link preview cards for local documents and external web pages.
External pages are described from their Open Graph, Twitter Card and
HTML meta tags.
"""

__version__ = "1.0.0"
__author__ = "post-card contributors"
