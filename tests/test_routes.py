import pytest

from ripkit.routes import DYNAMIC_PREFIX, Route, dynamic


@pytest.mark.parametrize(
    "route, path",
    [
        (Route.JS, "/_/js"),
        (Route.CSS, "/_/css"),
        (Route.RELOAD, "/_/reload"),
        (Route.LABELS_FOR_FILE, "/_/labelsForFile"),
        (Route.HTML_FOR_FILE, "/_/htmlForFile"),
        (Route.RUN_BLOCK, "/_/runCodeBlock"),
        (Route.SAVE, "/_/save"),
        (Route.LISSAJOUS, "/_/image"),
        (Route.QUIT, "/_/quit"),
        (Route.DEBUG, "/_/debug"),
    ],
)
def test_dynamic_paths(route, path):
    assert dynamic(route) == path


def test_web_socket_shares_debug_label():
    assert dynamic(Route.WEB_SOCKET) == dynamic(Route.DEBUG)
    assert Route.WEB_SOCKET is not Route.DEBUG


def test_all_routes_are_prefixed():
    for route in Route:
        assert dynamic(route).startswith(DYNAMIC_PREFIX)
        assert len(dynamic(route)) > len(DYNAMIC_PREFIX)