"""intlang: a single-pass interpreter for integer declarations and print statements."""
