"""User management core.

- models/: User entity and the request/response models
- services/: store, logger and notifier ports, their reference adapters, and
  the UserService application service
- wiring: composition root
"""

__version__ = "0.1.0"
