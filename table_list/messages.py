"""
Translation catalog for django-table-list.

Templates and Python code look messages up by a fixed key so projects can
translate them through the usual gettext catalogs without touching templates.
"""
from django.utils.translation import gettext_lazy as _


MESSAGES = {
    "modal.title": _("Deletion confirmation"),
    "modal.question": _('Are you sure you want to delete the line "%(entity)s"?'),
    "modal.cancel": _("Cancel"),
    "modal.confirm": _("Confirm"),
    "thead.actions": _("Actions"),
    "thead.search": _("Search by: %(columns)s"),
    "tbody.empty": _("No results were found."),
    "tfoot.navigation": _("Showing lines %(start)s to %(stop)s of %(total)s"),
    "rows_number": _("Number of lines"),
    "button.create": _("Create"),
    "button.edit": _("Edit"),
    "button.destroy": _("Delete"),
    "toggle.activate": _("Activate"),
    "toggle.deactivate": _("Deactivate"),
}


def trans(key, **params):
    """
    Return the translated message for ``key``.

    Keyword arguments are interpolated into the message with ``%`` formatting.
    Raises KeyError for unknown keys.
    """
    message = str(MESSAGES[key])
    if params:
        return message % params
    return message
