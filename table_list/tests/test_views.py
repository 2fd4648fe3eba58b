"""
Tests for TableListView
"""
from django.core.exceptions import ImproperlyConfigured
from django.test import RequestFactory, TestCase

from table_list.table_list import TableList
from table_list.tests.models import Company
from table_list.views import TableListView


class TestTableListView(TestCase):
    """Test cases for TableListView"""

    @classmethod
    def setUpTestData(cls):
        cls.acme = Company.objects.create(name="Acme", email="contact@acme.test", active=True)
        cls.globex = Company.objects.create(name="Globex", email="hello@globex.test", active=False)

    def test_list_renders_table(self):
        response = self.client.get("/companies/")

        self.assertEqual(response.status_code, 200)
        table_list = response.context["table_list"]
        self.assertIsInstance(table_list, TableList)
        self.assertContains(response, "Acme")
        self.assertContains(response, "Globex")
        self.assertContains(response, f'id="destroy-confirm-modal-{self.acme.pk}"')
        self.assertContains(response, f'href="/companies/{self.acme.pk}/edit/"')
        self.assertContains(response, f'href="/companies/{self.globex.pk}/activate/"')
        self.assertContains(response, f'href="/companies/{self.acme.pk}/deactivate/"')

    def test_list_search(self):
        response = self.client.get("/companies/", {"search": "globex"})

        self.assertEqual(response.status_code, 200)
        records = [row.record for row in response.context["table_list"].get_table().rows]
        self.assertEqual(records, [self.globex])
        self.assertNotContains(response, "contact@acme.test")

    def test_list_sort(self):
        response = self.client.get("/companies/", {"sort_by": "name", "sort_dir": "desc"})

        table_list = response.context["table_list"]
        self.assertEqual(table_list.sort_dir, "desc")
        self.assertEqual(list(table_list.get_page().object_list), [self.globex, self.acme])
        self.assertContains(response, "bi-sort-down")

    def test_sortable_header_links(self):
        response = self.client.get("/companies/")

        self.assertContains(response, 'href="?sort_by=name&amp;sort_dir=desc"')

    def test_empty_list(self):
        Company.objects.all().delete()

        response = self.client.get("/companies/")

        self.assertContains(response, "No results were found.")

    def test_get_table_list_is_required(self):
        view = TableListView()
        view.setup(RequestFactory().get("/"))

        with self.assertRaises(ImproperlyConfigured):
            view.get_context_data()
