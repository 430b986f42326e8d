"""Command-line interface adapters.

Provides CLI commands for working with the cart:
- add / remove: Stage or drop a domain
- clear / sweep / keep-best: Reduce the cart
- export / purchase: Act on the staged domains
- view: Render the cart
"""
