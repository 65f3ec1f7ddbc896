"""
BFHL service core: numeric kernels, Gemini delegate and request dispatch.
"""

__version__ = "1.0.0"
