"""CAS Property Search: relaxed-name lookup over configuration metadata.

The package loads Spring-style configuration metadata documents into a
catalog and finds properties whose relaxed spellings (kebab case, upper-case
environment variable style, flattened camel case, ...) match a regular
expression. The `cas-properties find` command is the CLI surface.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
