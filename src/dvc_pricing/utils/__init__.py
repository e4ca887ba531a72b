"""Date, money and logging helpers."""
