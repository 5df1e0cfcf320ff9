"""
Domain Layer - Pure Business Logic

This layer contains:
- Entities: Client, Vehicle and the ServiceOrder workflow aggregate
- Value Objects: Self-validating identifiers (tax id, email, plate, VIN)
- Interfaces: The clock abstraction entities read time from

No external dependencies allowed in this layer.
"""
