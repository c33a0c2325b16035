"""Market Domain Layer."""
