from django.core.exceptions import ImproperlyConfigured
from django.template.loader import render_to_string
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from table_list import conf
from table_list.messages import MESSAGES, trans


DESTROY_CONFIRM_MODAL_TEMPLATE = "table_list/partials/destroy_confirm_modal.html"


def destroy_confirmation_question(table_list, record):
    """
    Return the destroy confirmation question for ``record``.

    The value of the table list destroy attribute is escaped unless the
    TABLE_LIST_DESTROY_CONFIRMATION_ALLOW_HTML setting is enabled.
    """
    if not table_list.destroy_attribute:
        raise ImproperlyConfigured(
            f"{table_list!r} has no destroy confirmation attribute. "
            "Call use_for_destroy_confirmation() on one of its columns."
        )
    entity = getattr(record, table_list.destroy_attribute)
    if conf.DESTROY_CONFIRMATION_ALLOW_HTML:
        entity = mark_safe(entity)
    question = conditional_escape(str(MESSAGES["modal.question"]))
    return mark_safe(question % {"entity": conditional_escape(entity)})


def render_destroy_confirm_modal(table_list, record, request=None):
    """Render the destroy confirmation modal of a table list row."""
    context = {
        "table_list": table_list,
        "record": record,
        "modal_id": f"destroy-confirm-modal-{record.pk}",
        "title": trans("modal.title"),
        "question": destroy_confirmation_question(table_list, record),
        "cancel": trans("modal.cancel"),
        "confirm": trans("modal.confirm"),
    }
    return render_to_string(DESTROY_CONFIRM_MODAL_TEMPLATE, context, request=request)
