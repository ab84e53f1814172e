"""Class-based views of the public site."""
