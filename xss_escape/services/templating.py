"""
Jinja2 filters for contextual escaping in templates.

Usage:
    from xss_escape.services.templating import install_filters

    templates = Jinja2Templates(directory="templates")
    install_filters(templates)

    {# in a template #}
    <a{{ profile_url | html_attr("href") }}>{{ username | html_body }}</a>
    <script>var name = '{{ username | js_var }}';</script>
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict

from jinja2 import Environment
from markupsafe import Markup

from xss_escape.utils.safe_encoding import (
    css_value,
    html_attr,
    html_attr_value,
    html_body,
    js_var,
    json_in_html,
    url_param,
)

logger = logging.getLogger(__name__)


def _markup(func: Callable[..., str]) -> Callable[..., Markup]:
    """Mark a filter's output as already escaped for autoescaping templates."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Markup:
        return Markup(func(*args, **kwargs))

    return wrapper


def _html_attr_filter(value: Any, attr_name: str, wrap: bool = True) -> str:
    return html_attr(attr_name, value, wrap=wrap)


FILTERS: Dict[str, Callable[..., Markup]] = {
    "html_body": _markup(html_body),
    "html_attr_value": _markup(html_attr_value),
    "html_attr": _markup(_html_attr_filter),
    "js_var": _markup(js_var),
    "css_value": _markup(css_value),
    "url_param": _markup(url_param),
    "json_in_html": _markup(json_in_html),
}


def install_filters(target: Any) -> Environment:
    """
    Register the escaping filters on a Jinja2 environment.

    Args:
        target: A jinja2.Environment, or an object exposing one as ``env``
            such as fastapi's Jinja2Templates

    Returns:
        The environment the filters were added to
    """
    environment = target if isinstance(target, Environment) else target.env
    environment.filters.update(FILTERS)
    logger.debug("Installed %d escaping filters", len(FILTERS))
    return environment


def create_environment(**kwargs: Any) -> Environment:
    """Build an autoescaping Jinja2 environment with the filters installed."""
    kwargs.setdefault("autoescape", True)
    return install_filters(Environment(**kwargs))
