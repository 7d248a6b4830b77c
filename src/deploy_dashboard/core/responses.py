import json
from typing import Any

from fastapi.responses import JSONResponse


class AsciiJSONResponse(JSONResponse):
    """JSON response with non-ASCII characters escaped.

    Payloads are arbitrary JSON and may hold lone surrogates, which the
    default UTF-8 rendering cannot encode.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=True, separators=(",", ":")).encode("ascii")
