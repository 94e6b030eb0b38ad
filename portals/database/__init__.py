"""
This package manages the MongoDB client and its FastAPI dependencies.
"""
