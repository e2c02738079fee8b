from __future__ import annotations

from leafsync.contracts.panel import HtmlWidget, MapWidget, PanelDescriptor


def test_html_widget_is_a_map_widget() -> None:
    assert isinstance(HtmlWidget(html="<p></p>"), MapWidget)
    assert not isinstance(object(), MapWidget)


def test_html_widget_renders_fragment_unchanged() -> None:
    fragment = '<div id="m1" class="leaflet html-widget" style="height:400px;"></div>'

    assert HtmlWidget(html=fragment, element_id="m1").render_html() == fragment


def test_html_widget_does_not_add_a_second_map_container() -> None:
    rendered = HtmlWidget(html='<div id="m1" class="leaflet"></div>', element_id="m1").render_html()

    assert rendered.count('id="m1"') == 1
    assert rendered.count("leaflet") == 1


def test_html_widget_without_id_renders_fragment_as_is() -> None:
    assert HtmlWidget(html="<p>map</p>").render_html() == "<p>map</p>"


def test_panel_descriptor_keeps_content_identity() -> None:
    widget = HtmlWidget(html="")
    panel = PanelDescriptor(index=0, id="m0", content=widget)

    assert panel.content is widget
