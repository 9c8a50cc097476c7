"""Text annotation engine.

Overlays grammar suggestions and per-sentence AI-origin flags onto
plain-text documents as HTML markup.
"""

__version__ = "0.1.0"
