from .columns import TableListColumn
from .exceptions import (
    DuplicateConfigurationError,
    InvalidSortDirectionError,
)
from .table_list import TableList

__all__ = [
    'TableList',
    'TableListColumn',
    'DuplicateConfigurationError',
    'InvalidSortDirectionError',
]
