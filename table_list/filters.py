import functools
import operator

import django_filters
from django import forms
from django.db.models import Q


class TableListFilterSet(django_filters.FilterSet):
    """Search a table list queryset across its searchable columns."""

    search = django_filters.CharFilter(
        method='filter_search',
        label='Search',
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'type': 'search',
        })
    )

    def __init__(self, *args, **kwargs):
        self.table_list = kwargs.pop('table_list')
        super().__init__(*args, **kwargs)
        self.filters['search'].field.widget.attrs['placeholder'] = (
            self.table_list.get_search_placeholder()
        )

    def filter_search(self, queryset, name, value):
        """Search across the searchable columns"""
        columns = self.table_list.searchable_columns
        if not value or not columns:
            return queryset

        query = functools.reduce(
            operator.or_,
            (Q(**{f'{column.lookup}__icontains': value}) for column in columns),
        )
        return queryset.filter(query).distinct()
