"""Infrastructure Layer for the workshop service.

Concrete implementations of the application layer interfaces:
- In-memory repositories for clients, vehicles and service orders
- A logging-backed event publisher
- Logging setup (text or JSON, optional rotating file)
"""
