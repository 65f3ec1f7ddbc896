"""
HTTP layer for the BFHL service.
"""
