from django.core.exceptions import ImproperlyConfigured
from django.template.loader import render_to_string
import django_tables2 as tables

from table_list import conf
from table_list.messages import trans


class TableListMixin:
    """
    Mixin for django-tables2 Table classes bound to a TableList configuration.
    Usage:
        table = MyTable(records, table_list=table_list)
    """
    table_list = None

    def __init__(self, *args, table_list=None, **kwargs):
        super().__init__(*args, **kwargs)
        if table_list is not None:
            self.table_list = table_list
        if self.table_list is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} must be given a 'table_list'."
            )
        # Not passed to Table.__init__, RequestConfig would paginate the page again
        self.request = self.table_list.request


class TableIdMixin:
    """
    Mixin for django-tables2 Table classes to add a unique ID to each table instance.
    This is useful for targeting specific tables in JavaScript or CSS.
    Usage:
        class MyTable(TableIdMixin, tables.Table):
            table_id = "my_table_id"
    """
    table_id: str = None  # Override in your table or set as class attribute

    def __init__(self, *args, table_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        if table_id is not None:
            self.table_id = table_id
        if not self.table_id:
            self.table_id = f"{self.__class__.__name__.lower()}-table"
        self.attrs.setdefault('id', self.table_id)


class BootstrapTableMixin:
    """
    Mixin for django-tables2 Table classes to add Bootstrap 5 classes to the table.
    The classes default to the TABLE_LIST_BOOTSTRAP_TABLE_CLASS setting.
    """
    bootstrap_table_class = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.attrs.setdefault(
            "class", self.bootstrap_table_class or conf.BOOTSTRAP_TABLE_CLASS
        )


class ActionsColumnMixin:
    """
    Mixin for TableList tables adding an actions column with the edit and destroy
    controls of each row.

    The column is added when the table list defines an 'edit' or a 'destroy'
    route. The destroy control opens the row destroy confirmation modal.
    """
    has_actions_column = False  # Toggle this to enable/disable the actions column

    edit_action = {
        'name': 'edit',
        'route': 'edit',
        'icon': 'bi bi-pencil-square',
        'class': 'btn btn-sm btn-primary',
        'title': 'button.edit',
        'requires_modal': False,
    }
    destroy_action = {
        'name': 'destroy',
        'route': 'destroy',
        'icon': 'bi bi-trash',
        'class': 'btn btn-sm btn-danger',
        'title': 'button.destroy',
        'requires_modal': True,
        'modal_target': '#destroy-confirm-modal-',
        'modal_toggle': 'modal',
    }

    actions_template_name = 'table_list/partials/actions_column.html'

    def __new__(cls, *args, **kwargs):
        if not getattr(cls, 'has_actions_column'):
            return super().__new__(cls)

        if 'actions' not in cls.base_columns:
            cls.base_columns['actions'] = tables.Column(
                orderable=False,
                verbose_name=trans('thead.actions'),
                empty_values=(),
                attrs={'td': {'class': 'text-end text-nowrap actions-column'},
                       'th': {'class': 'text-end'}},
            )
        return super().__new__(cls)

    def __init__(self, *args, has_actions_column=None, **kwargs):
        super().__init__(*args, **kwargs)
        if has_actions_column is not None:
            self.has_actions_column = has_actions_column

        self.enabled_actions = []
        if not getattr(self, 'has_actions_column', True):
            return
        self.enabled_actions = self._get_enabled_actions()

    def _get_enabled_actions(self):
        """Return a list of enabled actions with their configuration."""
        actions = []
        for action_config in (self.edit_action, self.destroy_action):
            if self.table_list.is_route_defined(action_config['route']):
                actions.append(self._normalize_action_config(action_config))
        return actions

    def _normalize_action_config(self, config):
        """Normalize an action configuration dictionary."""
        try:
            action = {
                'name': config['name'],
                'route': config['route'],
                'icon': config['icon'],
                'class': config['class'],
                'title': trans(config['title']),
                'requires_modal': config.get('requires_modal', False),
            }

            # Handle modal configuration
            if action['requires_modal']:
                action['modal_target'] = config['modal_target']
                action['modal_toggle'] = config['modal_toggle']
        except KeyError as exc:
            raise ImproperlyConfigured(f'{self.__class__.__name__} is improperly configured') from exc
        return action

    def render_actions(self, record):
        """Render the action controls of a row."""
        actions = [
            dict(action, url=self.table_list.get_route(action['route'], record))
            for action in self.enabled_actions
        ]
        context = {
            'table_list': self.table_list,
            'record': record,
            'actions': actions,
        }
        return render_to_string(self.actions_template_name, context, request=self.request)
