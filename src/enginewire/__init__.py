"""enginewire: wires configuration counts into engine description builders."""

__version__ = "0.1.0"
