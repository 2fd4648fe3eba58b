import copy
import datetime

from django.utils import dateformat, timezone
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe

import django_tables2 as tables

from table_list.messages import trans
from table_list.table_mixins import (
    ActionsColumnMixin,
    BootstrapTableMixin,
    TableIdMixin,
    TableListMixin,
)


class TableListColumnRenderer(tables.Column):
    """
    django-tables2 column rendering a cell from a TableListColumn configuration.

    The cell value goes through, in this order: the configuration value closure,
    the HTML element closure (rendered as-is), the activation toggle, the date
    format, the string limit, then the image, button and link wrappers.
    """

    def __init__(self, config, **kwargs):
        self.config = config
        kwargs.setdefault("verbose_name", config.get_title())
        kwargs.setdefault("accessor", config.lookup)
        kwargs.setdefault("orderable", False)
        kwargs.setdefault("empty_values", ())
        super().__init__(**kwargs)

    def __deepcopy__(self, memo):
        # Tables deep copy their columns, the configuration stays shared with the table list
        memo[id(self.config)] = self.config
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(copy.deepcopy(self.__dict__, memo))
        return clone

    def render(self, value, record, bound_column):
        config = self.config
        if config.configuration_closure is not None:
            value = config.configuration_closure(record, config)
        if config.html_element_closure is not None:
            return mark_safe(config.html_element_closure(record, config))
        if config.activation_toggle:
            return self.render_activation_toggle(value, record)
        raw = value
        if value is None or value == "":
            if config.image_path_closure is None:
                return bound_column.default
            value = ""
        else:
            if config.date_format and isinstance(value, (datetime.date, datetime.time)):
                value = self.format_date(value)
            value = config.limit_string(value)

        if config.image_path_closure is not None:
            return format_html(
                '<img src="{}" alt="{}" class="img-thumbnail">',
                config.image_path_closure(record, config),
                value,
            )
        if config.button_class:
            html = format_html(
                '<button type="button" class="btn {}">{}</button>', config.button_class, value
            )
        else:
            html = conditional_escape(value)
        if config.link:
            href = config.link_closure(record, config) if config.link_closure else raw
            html = format_html('<a href="{}" title="{}">{}</a>', href, value, html)
        return html

    def format_date(self, value):
        if isinstance(value, datetime.time):
            return dateformat.time_format(value, self.config.date_format)
        if isinstance(value, datetime.datetime) and timezone.is_aware(value):
            value = timezone.localtime(value)
        return dateformat.format(value, self.config.date_format)

    def render_activation_toggle(self, value, record):
        table_list = self.config.table_list
        if value:
            route, icon = "deactivate", "bi bi-toggle-on text-success"
        else:
            route, icon = "activate", "bi bi-toggle-off text-danger"
        title = trans(f"toggle.{route}")
        if not table_list.is_route_defined(route):
            return format_html('<i class="{}" title="{}"></i>', icon, title)
        return format_html(
            '<a href="{}" title="{}"><i class="{}"></i></a>',
            table_list.get_route(route, record),
            title,
            icon,
        )


class TableListTable(
    ActionsColumnMixin,
    TableListMixin,
    TableIdMixin,
    BootstrapTableMixin,
    tables.Table,
):
    """
    Base table generated for a TableList by table_factory().

    Ordering and pagination are handled by the TableList, the table only holds
    the records of the current page.
    """

    class Meta:
        orderable = False


def table_factory(table_list):
    """
    Return a TableListTable subclass with one column per table list column.

    Columns are named after their lookup. A repeated lookup gets the column
    index as suffix, e.g. ``name_2``.
    """
    attrs = {}
    for index, column in enumerate(table_list.columns):
        name = column.lookup
        if name in attrs:
            name = f"{column.lookup}_{index}"
        attrs[name] = TableListColumnRenderer(column)
    attrs["has_actions_column"] = (
        table_list.is_route_defined("edit") or table_list.is_route_defined("destroy")
    )
    attrs["Meta"] = type(
        "Meta",
        (TableListTable.Meta,),
        {
            "model": table_list.model,
            "fields": (),
            "empty_text": trans("tbody.empty"),
        },
    )
    name = f"{table_list.model.__name__}TableListTable"
    return type(name, (TableListTable,), attrs)
