"""CLI command modules for guestbook."""
