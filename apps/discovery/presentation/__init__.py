"""Discovery Presentation Layer."""
