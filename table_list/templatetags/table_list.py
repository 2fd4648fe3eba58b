from django import template

from table_list.messages import trans
from table_list.modals import render_destroy_confirm_modal

register = template.Library()


@register.simple_tag(takes_context=True)
def render_table_list(context, table_list):
    """
    Render a configured table list.

    The table list handles the template request when the view did not call
    handle_request() itself.

    Usage:
        {% load table_list %}
        {% render_table_list table_list %}
    """
    return table_list.render(request=context.get("request"))


@register.simple_tag(takes_context=True)
def destroy_confirm_modal(context, table_list, record):
    """
    Render the destroy confirmation modal of a row.

    Usage:
        {% load table_list %}
        <form method="post" action="{% url 'companies:destroy' record.pk %}">
            {% csrf_token %}
            {% destroy_confirm_modal table_list record %}
        </form>
    """
    return render_destroy_confirm_modal(table_list, record, request=context.get("request"))


@register.simple_tag
def table_list_message(key, **kwargs):
    """
    Usage:
        {% table_list_message 'modal.title' %}
        {% table_list_message 'modal.question' entity=record.name %}
    """
    return trans(key, **kwargs)


@register.simple_tag
def table_list_route(table_list, key, record=None):
    """URL of a table list route, or an empty string when the route is not defined."""
    if not table_list.is_route_defined(key):
        return ""
    return table_list.get_route(key, record)


@register.simple_tag
def table_list_sort_url(table_list, column):
    return table_list.sort_querystring(column)


@register.simple_tag
def table_list_querystring(table_list, **kwargs):
    """
    Build the table list querystring, keeping its search, sort and rows number.

    Usage:
        {% table_list_querystring table_list page=2 %}

        {# Output: ?search=acme&sort_by=name&sort_dir=asc&page=2 #}
    """
    return table_list.querystring(**kwargs)
