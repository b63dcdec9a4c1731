"""ALDENAIR storefront cart service"""

__version__ = "1.0.0"
