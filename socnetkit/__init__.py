"""Links, link filters, link factories, nodes and generators for (social) network models, with a small demo command."""

__version__ = "0.1.0"
__all__ = ["links", "factories", "filters", "nodes", "generators", "demo"]