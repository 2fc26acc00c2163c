"""Bookstore vertical configuration.

Re-exports the BookstoreConfig from the patterns module,
demonstrating how verticals use the domain config pattern.
"""

from patterns.domain_config import BookstoreConfig

# Resolved from BOOKSTORE_* environment variables at import
config = BookstoreConfig.from_env()
