"""E-paper services: directory, view counter, viewer and storage."""
