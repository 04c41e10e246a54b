import re
from urllib.parse import unquote

from hello_addon.schemas.type_defs import ParsedRequest

_EXTENSION = re.compile(r"\.\w+$")


def split_segments(path_info: str) -> list:
    """
    Split a resource path into percent-decoded segments.

    "/movie/Hello,%20Ruby.json" -> ["movie", "Hello, Ruby"]
    """
    path = path_info[1:] if path_info.startswith("/") else path_info
    path = _EXTENSION.sub("", path)
    if not path:
        return []

    segments = path.split("/")
    while segments and segments[-1] == "":
        segments.pop()
    return [unquote(segment) for segment in segments]


def parse_request(path_info: str) -> ParsedRequest:
    """
    Parse the part of a request path below the resource mount.

    Missing segments come back as None; nothing is validated here, the
    handlers treat unknown or absent values as "no match".
    """
    segments = split_segments(path_info)
    return {
        "type": segments[0] if len(segments) > 0 else None,
        "id": segments[1] if len(segments) > 1 else None,
        "extra_args": segments[2:],
    }
