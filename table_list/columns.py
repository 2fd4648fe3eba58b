from django.utils.text import capfirst

from table_list import conf


class TableListColumn:
    """
    Configuration of one table list column.

    Columns are created through TableList.add_column() and configured with
    chained calls, every method returning the column itself.

    Usage:
        table_list.add_column("name") \\
            .set_title("Name") \\
            .sort_by_default("asc") \\
            .is_sortable() \\
            .is_searchable() \\
            .use_for_destroy_confirmation()

    Closures given to is_image(), is_configuration_value(), is_link() and
    is_html_element() are called with the row record and the column:
        column.is_link(lambda record, column: record.get_absolute_url())
    """

    def __init__(self, table_list, attribute: str):
        self.table_list = table_list
        self.column_table: str = table_list.model._meta.db_table
        self.has_custom_table = False
        self.attribute = attribute

        self.title: str | None = None
        self.sortable = False
        self.searchable = False
        self.date_format: str | None = None
        self.button_class: str | None = None
        self.string_limit: int | None = None
        self.activation_toggle = False
        self.link = False

        self.image_path_closure = None
        self.configuration_closure = None
        self.link_closure = None
        self.html_element_closure = None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.column_table}.{self.attribute}>"

    def set_title(self, title: str | None = None):
        """Set the column title shown in the table header."""
        self.title = title
        return self

    def sort_by_default(self, direction: str = "asc"):
        """
        Sort the table list by this column when the request does not ask for
        another sort. Only one column of a table list can be sorted by default.
        """
        self.table_list.set_default_sort(self.attribute, direction)
        return self

    def use_for_destroy_confirmation(self):
        """
        Use this column attribute in the destroy confirmation question.
        Only one column of a table list can be used.
        """
        self.table_list.set_destroy_attribute(self.attribute)
        return self

    def is_sortable(self):
        self.sortable = True
        self.table_list.add_sortable_column(self)
        return self

    def is_searchable(self):
        self.searchable = True
        self.table_list.add_searchable_column(self)
        return self

    def set_custom_table(self, custom_table: str):
        """
        Search and sort this column through a related model.

        ``custom_table`` is the relation path from the table list model, the
        column value, search and sort all go through ``<custom_table>__<attribute>``.
        """
        self.column_table = custom_table
        self.has_custom_table = True
        return self

    def format_date(self, date_format: str):
        """Set a django.utils.dateformat format, e.g. 'd/m/Y H:i'."""
        self.date_format = date_format
        return self

    def is_button(self, button_class: str):
        self.button_class = button_class
        return self

    def is_image(self, image_path_closure):
        self.image_path_closure = image_path_closure
        return self

    def set_string_limit(self, string_limit: int):
        self.string_limit = string_limit
        return self

    def is_activation_toggle(self):
        """Render an activate / deactivate toggle instead of the value."""
        self.activation_toggle = True
        return self

    def is_configuration_value(self, configuration_closure):
        self.configuration_closure = configuration_closure
        return self

    def is_link(self, link_closure=None):
        """Wrap the value in a link, to the closure result or the value itself."""
        self.link = True
        self.link_closure = link_closure
        return self

    def is_html_element(self, html_element_closure):
        self.html_element_closure = html_element_closure
        return self

    @property
    def lookup(self) -> str:
        """ORM lookup used to read, search and sort this column."""
        if self.has_custom_table:
            return f"{self.column_table}__{self.attribute}"
        return self.attribute

    def get_title(self) -> str:
        if self.title is not None:
            return self.title
        return capfirst(self.attribute.replace("__", " ").replace("_", " "))

    def limit_string(self, value) -> str:
        value = str(value)
        if self.string_limit is None or len(value) <= self.string_limit:
            return value
        return value[: self.string_limit].rstrip() + conf.STRING_LIMIT_ELLIPSIS
