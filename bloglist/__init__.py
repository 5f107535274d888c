"""
Bloglist - posts, their authors, and password/token authentication.
"""

__version__ = "0.1.0"
