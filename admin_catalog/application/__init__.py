"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Commands: Write operations that change state
- Queries: Read operations that return data
- Use Cases: Orchestrate domain logic through gateways
- DTOs: Outputs handed back to the API layer
- Protocols: Gateway interfaces implemented by infrastructure
"""
