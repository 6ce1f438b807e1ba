"""REST API for the Password Strength Meter."""
