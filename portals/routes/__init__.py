"""
This package contains the FastAPI routers of the portals.
"""
