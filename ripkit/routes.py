"""URL routes and query/cookie keys shared by the web server and its pages."""

from __future__ import annotations

import enum

#: Prefix of dynamic requests (rendering, POSTs, control), as opposed to
#: static content such as images.
DYNAMIC_PREFIX = "/_/"

# Query parameter and cookie field names; short and unique.
KEY_MD_SESS_ID = "sid"
KEY_IS_TITLE_ON = "tit"
KEY_IS_NAV_ON = "nav"
KEY_MD_FILE_INDEX = "fix"
KEY_BLOCK_INDEX = "bix"


class Route(enum.IntEnum):
    """Dynamic endpoints of the web server."""

    UNKNOWN = 0
    #: GET most of the javascript needed by the web app.
    JS = 1
    #: GET all the css needed by the web app.
    CSS = 2
    #: Reload all data from the file system.
    RELOAD = 3
    #: GET code block labels of one markdown file.
    LABELS_FOR_FILE = 4
    #: GET the HTML of one markdown file.
    HTML_FOR_FILE = 5
    #: POST to trigger code block execution.
    RUN_BLOCK = 6
    #: POST to save application state.
    SAVE = 7
    #: A big Lissajous image.
    LISSAJOUS = 8
    #: Tell the server to quit.
    QUIT = 9
    #: Render a debug page.
    DEBUG = 10
    #: Set up a socket.
    WEB_SOCKET = 11

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Route.UNKNOWN: "RouteUnknown",
    Route.JS: "js",
    Route.CSS: "css",
    Route.RELOAD: "reload",
    Route.LABELS_FOR_FILE: "labelsForFile",
    Route.HTML_FOR_FILE: "htmlForFile",
    Route.RUN_BLOCK: "runCodeBlock",
    Route.SAVE: "save",
    Route.LISSAJOUS: "image",
    Route.QUIT: "quit",
    Route.DEBUG: "debug",
    Route.WEB_SOCKET: "debug",
}


def dynamic(route: Route) -> str:
    """Return the URL path of a dynamic route."""
    return DYNAMIC_PREFIX + str(route)