"""Allow ``python -m enginewire``."""

from enginewire.cli import cli

cli()
