"""
subfind - passive subdomain discovery
Queries public data sources concurrently and prints unique subdomains.
"""

__version__ = "0.1.0"
