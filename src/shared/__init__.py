"""Code shared between entry points (plotting)."""
