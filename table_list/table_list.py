import logging

from django.core.exceptions import ImproperlyConfigured
from django.core.paginator import Paginator
from django.http import QueryDict
from django.template.loader import render_to_string
from django.urls import reverse

from table_list import conf
from table_list.columns import TableListColumn
from table_list.exceptions import DuplicateConfigurationError, InvalidSortDirectionError
from table_list.filters import TableListFilterSet
from table_list.messages import trans
from table_list.tables import table_factory


logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ("asc", "desc")
REQUIRED_ROUTES = ("index",)
OPTIONAL_ROUTES = ("create", "edit", "destroy", "activate", "deactivate")


class TableList:
    """
    Table-wide configuration of a model list.

    Usage:
        table_list = TableList(Company).set_routes({
            "index": "companies:index",
            "create": "companies:create",
            "edit": "companies:edit",
            "destroy": "companies:destroy",
        })
        table_list.add_column("name").sort_by_default().is_sortable().is_searchable() \\
            .use_for_destroy_confirmation()
        table_list.add_column("created_at").format_date("d/m/Y H:i").is_sortable()
        table_list.handle_request(request)
        html = table_list.render()

    The sort state and the destroy confirmation attribute belong to the table
    list but are set through its columns. Both can only be set once.
    """

    def __init__(self, model):
        self.model = model
        self.columns: list[TableListColumn] = []
        self.sortable_columns: list[TableListColumn] = []
        self.searchable_columns: list[TableListColumn] = []

        self.sort_by: str | None = None
        self.sort_dir: str | None = None
        self._default_sort = None
        self.destroy_attribute: str | None = None

        self.routes: dict[str, str] = {}
        self.rows_number: int = conf.ROWS_NUMBER
        self.rows_number_selector = False
        self.query_instructions = []

        self.request = None
        self.search = ""
        self.page_number = 1
        self._page = None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.model.__name__}>"

    # Configuration

    def add_column(self, attribute: str) -> TableListColumn:
        column = TableListColumn(self, attribute)
        self.columns.append(column)
        return column

    def set_routes(self, routes: dict[str, str]):
        """
        Set the Django URL names used by the table list.

        'index' is required. 'create', 'edit', 'destroy', 'activate' and
        'deactivate' are optional; the row routes are reversed with the record pk.
        """
        missing = [key for key in REQUIRED_ROUTES if key not in routes]
        if missing:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} routes are missing the required "
                f"{', '.join(repr(key) for key in missing)} route(s)."
            )
        unknown = [key for key in routes if key not in REQUIRED_ROUTES + OPTIONAL_ROUTES]
        if unknown:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} does not support the "
                f"{', '.join(repr(key) for key in unknown)} route(s)."
            )
        self.routes = dict(routes)
        return self

    def set_rows_number(self, rows_number: int):
        self.rows_number = rows_number
        return self

    def enable_rows_number_selector(self):
        self.rows_number_selector = True
        return self

    def add_query_instructions(self, instructions):
        """Add a callable receiving and returning the list queryset."""
        self.query_instructions.append(instructions)
        return self

    def set_default_sort(self, attribute: str, direction: str):
        if self._default_sort is not None:
            raise DuplicateConfigurationError(
                "The sort_by_default() method has already been called. "
                "You can sort a column by default only once."
            )
        if direction not in SORT_DIRECTIONS:
            raise InvalidSortDirectionError(
                f'Invalid direction argument for sort_by_default(). '
                f'Has to be "asc" or "desc". "{direction}" given.'
            )
        self._default_sort = (attribute, direction)
        # A sort already read from the request wins over the default
        if self.sort_by is None:
            self.sort_by = attribute
        if self.sort_dir is None:
            self.sort_dir = direction

    def set_destroy_attribute(self, attribute: str):
        if self.destroy_attribute:
            raise DuplicateConfigurationError(
                "The use_for_destroy_confirmation() method has already been called. "
                "You can define a column attribute for the destroy confirmation only once."
            )
        self.destroy_attribute = attribute

    def add_sortable_column(self, column: TableListColumn):
        if column not in self.sortable_columns:
            self.sortable_columns.append(column)

    def add_searchable_column(self, column: TableListColumn):
        if column not in self.searchable_columns:
            self.searchable_columns.append(column)

    def get_column(self, attribute: str) -> TableListColumn | None:
        return next((column for column in self.columns if column.attribute == attribute), None)

    def get_sort_column(self) -> TableListColumn | None:
        """Column matching sort_by, sortable columns first."""
        if not self.sort_by:
            return None
        for column in self.sortable_columns:
            if column.attribute == self.sort_by:
                return column
        return self.get_column(self.sort_by)

    def check_configuration(self):
        if not self.columns:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} for {self.model.__name__} has no column. "
                "Declare columns with add_column()."
            )
        if self.is_route_defined("destroy") and not self.destroy_attribute:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} for {self.model.__name__} defines a 'destroy' route "
                "but no column calls use_for_destroy_confirmation()."
            )

    # Routes

    def is_route_defined(self, key: str) -> bool:
        return key in self.routes

    def get_route(self, key: str, record=None) -> str:
        try:
            url_name = self.routes[key]
        except KeyError as exc:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} requires the '{key}' route to be defined."
            ) from exc
        if record is None:
            return reverse(url_name)
        return reverse(url_name, args=[record.pk])

    # Request

    def handle_request(self, request):
        """
        Read the search, sort, rows number and page from the request query string.
        Invalid values are ignored.
        """
        self.request = request
        self._page = None
        params = request.GET

        self.search = params.get("search", "").strip()

        sort_by = params.get("sort_by")
        if sort_by:
            if any(column.attribute == sort_by for column in self.sortable_columns):
                self.sort_by = sort_by
            else:
                logger.warning("Ignoring sort on non sortable column %r", sort_by)

        sort_dir = params.get("sort_dir")
        if sort_dir:
            if sort_dir in SORT_DIRECTIONS:
                self.sort_dir = sort_dir
            else:
                logger.warning("Ignoring invalid sort direction %r", sort_dir)

        rows = params.get("rows")
        if rows:
            try:
                rows_number = int(rows)
            except (TypeError, ValueError):
                rows_number = 0
            if rows_number > 0:
                self.rows_number = rows_number
            else:
                logger.warning("Ignoring invalid rows number %r", rows)

        self.page_number = params.get("page", 1)
        logger.debug(
            "%r handled request: search=%r sort_by=%r sort_dir=%r rows=%s page=%s",
            self, self.search, self.sort_by, self.sort_dir, self.rows_number, self.page_number,
        )
        return self

    # Data

    def get_filterset(self, queryset=None) -> TableListFilterSet:
        """Search filter set, unbound when no search was requested."""
        if queryset is None:
            queryset = self.model._default_manager.none()
        data = {"search": self.search} if self.search else None
        return TableListFilterSet(data, queryset=queryset, table_list=self)

    def get_queryset(self):
        queryset = self.model._default_manager.all()
        for instructions in self.query_instructions:
            queryset = instructions(queryset)

        if self.searchable_columns:
            queryset = self.get_filterset(queryset).qs

        if self.sort_by:
            column = self.get_sort_column()
            lookup = column.lookup if column else self.sort_by
            prefix = "-" if self.sort_dir == "desc" else ""
            queryset = queryset.order_by(f"{prefix}{lookup}", "pk")
        else:
            queryset = queryset.order_by("pk")
        return queryset

    def get_page(self):
        if self._page is None:
            paginator = Paginator(self.get_queryset(), self.rows_number)
            self._page = paginator.get_page(self.page_number)
        return self._page

    def get_table(self):
        table_class = table_factory(self)
        return table_class(list(self.get_page().object_list), table_list=self)

    # Rendering helpers

    def querystring(self, **overrides) -> str:
        params = {
            "search": self.search,
            "sort_by": self.sort_by,
            "sort_dir": self.sort_dir,
            "rows": self.rows_number if self.rows_number != conf.ROWS_NUMBER else None,
        }
        params.update(overrides)
        query = QueryDict(mutable=True)
        for key, value in params.items():
            if value is not None and value != "":
                query[key] = value
        querystring = query.urlencode()
        return f"?{querystring}" if querystring else ""

    def sort_querystring(self, column: TableListColumn) -> str:
        """Query string sorting on ``column``, reversing the direction when already sorted."""
        if self.sort_by == column.attribute and self.sort_dir != "desc":
            direction = "desc"
        else:
            direction = "asc"
        return self.querystring(sort_by=column.attribute, sort_dir=direction, page=None)

    def get_search_placeholder(self) -> str:
        titles = ", ".join(column.get_title() for column in self.searchable_columns)
        return trans("thead.search", columns=titles)

    def get_navigation_status(self) -> str:
        page = self.get_page()
        return trans(
            "tfoot.navigation",
            start=page.start_index(),
            stop=page.end_index(),
            total=page.paginator.count,
        )

    def get_rows_number_choices(self) -> list[int]:
        return sorted(set(conf.ROWS_NUMBER_CHOICES) | {self.rows_number})

    def render(self, request=None) -> str:
        self.check_configuration()
        if request is not None and self.request is None:
            self.handle_request(request)
        context = {"table_list": self, "table": self.get_table()}
        return render_to_string(conf.TEMPLATE, context, request=self.request)
