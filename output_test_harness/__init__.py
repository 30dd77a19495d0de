"""Output comparison test harness."""
