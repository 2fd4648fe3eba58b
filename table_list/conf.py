# pylint: disable=missing-class-docstring,missing-function-docstring
"""
Configuration for django-table-list.

Settings can be overridden in Django settings.py using the prefix TABLE_LIST_
"""

from django.conf import settings


# Rows Settings
ROWS_NUMBER = getattr(settings, "TABLE_LIST_ROWS_NUMBER", 20)
"""
Number of rows displayed per page when the table list does not set one.
Default: 20
"""

ROWS_NUMBER_CHOICES = getattr(
    settings, "TABLE_LIST_ROWS_NUMBER_CHOICES", [10, 20, 50, 100]
)
"""
Values offered by the rows number selector.
Default: [10, 20, 50, 100]
"""

# Rendering Settings
STRING_LIMIT_ELLIPSIS = getattr(settings, "TABLE_LIST_STRING_LIMIT_ELLIPSIS", "...")
"""
Appended to values cut by set_string_limit().
Default: '...'
"""

DESTROY_CONFIRMATION_ALLOW_HTML = getattr(
    settings, "TABLE_LIST_DESTROY_CONFIRMATION_ALLOW_HTML", False
)
"""
Insert the destroy confirmation attribute value as trusted markup.
Default: False (the value is escaped)
Only enable it when the attribute never holds user supplied content.
"""

TEMPLATE = getattr(settings, "TABLE_LIST_TEMPLATE", "table_list/table.html")
"""
Template used by TableList.render() and the render_table_list tag.
Default: 'table_list/table.html'
"""

BOOTSTRAP_TABLE_CLASS = getattr(
    settings, "TABLE_LIST_BOOTSTRAP_TABLE_CLASS", "table table-sm table-hover"
)
"""
CSS classes set on the rendered <table>.
Default: 'table table-sm table-hover'
"""
