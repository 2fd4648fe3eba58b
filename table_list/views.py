import logging

from django.core.exceptions import ImproperlyConfigured
from django.views.generic import TemplateView


logger = logging.getLogger(__name__)


class TableListViewMixin:
    """
    Mixin for class-based views displaying a TableList.

    Subclasses build the table list in get_table_list(); the mixin lets it
    handle the request and adds it to the context as ``table_list``.
    """

    context_table_list_name = "table_list"

    def get_table_list(self):
        """
        Return the configured TableList.
        This must be overridden in subclasses.
        """
        raise ImproperlyConfigured(
            f"{self.__class__.__name__} must define a get_table_list() method."
        )

    def get_context_data(self, **kwargs) -> dict:
        # Safely call super() if it exists
        if hasattr(super(), "get_context_data"):
            context = super().get_context_data(**kwargs)
        else:
            context = kwargs.copy()
        table_list = self.get_table_list()
        table_list.handle_request(self.request)
        table_list.check_configuration()
        logger.debug("%s rendering %r", self.__class__.__name__, table_list)
        context[self.context_table_list_name] = table_list
        return context


class TableListView(TableListViewMixin, TemplateView):
    """
    TableListView is a reusable base class for Django views that display a model
    list configured with a TableList.

    Usage:
        class CompanyListView(TableListView):
            template_name = "companies/index.html"

            def get_table_list(self):
                table_list = TableList(Company).set_routes({
                    "index": "companies:index",
                    "edit": "companies:edit",
                    "destroy": "companies:destroy",
                })
                table_list.add_column("name").sort_by_default().is_sortable() \\
                    .is_searchable().use_for_destroy_confirmation()
                return table_list

    The template renders it with:
        {% load table_list %}
        {% render_table_list table_list %}
    """

    template_name = "table_list/index.html"
