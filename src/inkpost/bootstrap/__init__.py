"""Bootstrap (composition root) for INKPOST.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers (commands/queries), composes shared services (message bus, unit of
work, clock) and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `inkpost.adapters`, `inkpost.service_layer`,
  `inkpost.interfaces`, `inkpost.domain`, and `inkpost.config`.
- Inner layers must not import `inkpost.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
