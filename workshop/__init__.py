"""Workshop service: clients, vehicles and service orders for a repair workshop."""

__version__ = "1.0.0"
