"""sctags - vim tag files for Scala, with object-qualified member tags."""

__version__ = "0.1.0"
