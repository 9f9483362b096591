"""
Application layer: document-style query surface and services.
"""
