"""This module initializes the services package.

It re-exports the template engine so callers can build formatters for their
own value types without reaching into submodules. The date formatter lives in
`chronoformat.services.date_formatter` and is re-exported from the package root.
"""

from chronoformat.services.templates import Formattable, Formatter, Template, TemplateFormatter

__all__ = [
    "Formattable",
    "Formatter",
    "Template",
    "TemplateFormatter",
]
