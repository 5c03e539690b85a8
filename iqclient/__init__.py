"""Client entries and module clients for building and parsing IQUART messages."""

__version__ = "0.1.0"