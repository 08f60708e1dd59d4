"""Services that orchestrate the domain (conversion engine)."""
