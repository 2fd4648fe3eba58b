from django.http import HttpResponse
from django.urls import include, path

from table_list.table_list import TableList
from table_list.tests.models import Company
from table_list.views import TableListView


def placeholder(request, pk=None):
    return HttpResponse("")


class CompanyListView(TableListView):

    def get_table_list(self):
        table_list = TableList(Company).set_routes({
            "index": "companies:index",
            "create": "companies:create",
            "edit": "companies:edit",
            "destroy": "companies:destroy",
            "activate": "companies:activate",
            "deactivate": "companies:deactivate",
        })
        table_list.add_column("name").set_title("Name").sort_by_default("asc") \
            .is_sortable().is_searchable().use_for_destroy_confirmation()
        table_list.add_column("email").set_title("Email").is_searchable()
        table_list.add_column("active").set_title("Active").is_activation_toggle()
        return table_list


company_patterns = ([
    path("", CompanyListView.as_view(), name="index"),
    path("create/", placeholder, name="create"),
    path("<int:pk>/edit/", placeholder, name="edit"),
    path("<int:pk>/destroy/", placeholder, name="destroy"),
    path("<int:pk>/activate/", placeholder, name="activate"),
    path("<int:pk>/deactivate/", placeholder, name="deactivate"),
], "companies")

urlpatterns = [
    path("companies/", include(company_patterns)),
]
