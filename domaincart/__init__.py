"""Domain cart: validation, availability tracking and prioritization
for a domain-name shopping cart."""

__version__ = "0.1.0"
