"""Shared Jinja2 environment for the packaged templates."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader, Template, select_autoescape

_ENV = Environment(
    loader=PackageLoader("leafsync"),
    autoescape=select_autoescape(enabled_extensions=("html.j2",), default_for_string=False),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def get_template(name: str) -> Template:
    return _ENV.get_template(name)
