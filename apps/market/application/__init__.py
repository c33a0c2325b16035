"""Market Application Layer."""
