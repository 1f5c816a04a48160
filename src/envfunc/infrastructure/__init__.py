"""Infrastructure helpers: parsing and logging."""
