"""jobly: data-access layer for job postings."""

__version__ = "0.1.0"
