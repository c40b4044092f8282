"""
Feature modules live under this package.

Keep module boundaries clean: each module owns its models, service functions,
JSON endpoints and pages, while reusing platform primitives (config, DB session).
"""
