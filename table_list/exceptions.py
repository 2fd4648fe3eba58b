from django.core.exceptions import ImproperlyConfigured


class DuplicateConfigurationError(ImproperlyConfigured):
    """A table-wide option that may only be set once was set a second time."""


class InvalidSortDirectionError(ValueError):
    """A sort direction other than 'asc' or 'desc' was given."""
