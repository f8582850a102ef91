"""Swift endpoint specs."""
