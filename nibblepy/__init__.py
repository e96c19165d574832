"""4-bit unsigned integers computed bit by bit."""
