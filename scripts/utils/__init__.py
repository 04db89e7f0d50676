"""Shared configuration, logging and template helpers."""
