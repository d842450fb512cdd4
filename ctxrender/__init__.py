"""ctxrender - render a single template with a structured-data context.

Context comes from a TOML, JSON or YAML file, from environment variables, or
is empty. Rendering is delegated to Jinja2.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
