"""Entrypoints (inbound adapters) for INKPOST.

Expose the application to the outside world: the named-operation dispatcher
and the CLI. Parse and validate inputs, hand messages to the service layer,
and present results.

Dependency rule: may import `inkpost.service_layer` and `inkpost.bootstrap`;
avoid importing `inkpost.adapters` directly.
"""
