"""Market Infrastructure Layer."""
