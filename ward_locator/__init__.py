"""
ward-locator: resolves coordinates to municipal wards and sub-zones.
"""

__version__ = "0.1.0"
