"""authfields — validation of identity fields for the Identity Toolkit API."""

__version__ = "0.1.0"
