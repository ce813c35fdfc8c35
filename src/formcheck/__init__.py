"""formcheck — declarative form validation.

- formcheck.validation: the engine (rules, evaluators, aggregator)
- formcheck.metadata: form definitions in YAML and their JSON Schema
- formcheck.ui: page-side state that calls into the engine
- formcheck.cli: the ``formcheck`` command
"""

__version__ = "0.1.0"
