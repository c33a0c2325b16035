"""Market Presentation Layer."""
