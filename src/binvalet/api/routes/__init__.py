"""Route group exports."""

from . import bin_cleaning, customers, dashboard, health, messages, portal, routes

__all__ = ["bin_cleaning", "customers", "dashboard", "health", "messages", "portal", "routes"]
