"""mimeconf - lighttpd mimetype.assign generator.

Turns the system media-type database into an ordered
``mimetype.assign`` block for static file serving.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
