"""Service layer for INKPOST: messages, handlers and the message bus."""
