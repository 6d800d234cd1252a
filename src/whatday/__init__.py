"""What Day? - find the weekday of any date between 1800 and 2300."""
