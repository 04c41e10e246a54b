"""
Type definitions shared by the request parser and the handlers.
"""

from typing import Callable, List, Optional, TypedDict

from fastapi import Response


class ParsedRequest(TypedDict):
    """Segments extracted from a resource path such as /movie/tt0032138.json"""
    type: Optional[str]
    id: Optional[str]
    extra_args: List[str]  # reserved for protocol extras, unused by the handlers


# handler(path_info, store) -> response, or None to pass the request on
Handler = Callable[..., Optional[Response]]
