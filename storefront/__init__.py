"""
Storefront API - users, product catalog and order lifecycle
"""
__version__ = "1.0.0"
