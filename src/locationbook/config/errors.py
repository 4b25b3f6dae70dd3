"""Errors raised while loading configuration from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A configured value is present but unusable, e.g. a non-numeric timeout."""


class MissingConfigurationError(ConfigurationError):
    """A required variable such as the catalog base URL is unset or blank."""
