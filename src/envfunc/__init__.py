"""envfunc - typed environment variables for configuration expressions.

- Variables are registered per type (bool, int, string) with a description
  and a default
- Expression evaluators call the ``env_bool`` / ``env_int`` / ``env_string``
  functions to read the live process environment
- Unset or empty variables resolve to their registered default
"""

__version__ = "0.1.0"
