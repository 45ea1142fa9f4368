"""Configuration for guestbook: constants and persisted UI preferences."""
