"""cf app lister - list Cloud Foundry applications by state."""

__version__ = "0.1.0"
