from urllib.parse import parse_qs

from starlette.types import ASGIApp, Message, Receive, Scope, Send

METHOD_FIELD = "_method"
OVERRIDABLE_METHODS = ("PUT", "PATCH", "DELETE")
FORM_CONTENT_TYPE = b"application/x-www-form-urlencoded"


def _override_from(raw: bytes) -> str:
    values = parse_qs(raw.decode("latin-1")).get(METHOD_FIELD)
    if not values:
        return ""
    method = values[0].upper()
    return method if method in OVERRIDABLE_METHODS else ""


class MethodOverrideMiddleware:
    """
    HTML forms can only GET or POST. A POST carrying a ``_method`` field,
    in the query string or in a urlencoded body, is dispatched as that
    method instead (PUT, PATCH or DELETE).
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        method = _override_from(scope.get("query_string", b""))
        if not method and self._is_form(scope):
            body, receive = await self._buffer_body(receive)
            method = _override_from(body)

        if method:
            scope = dict(scope, method=method)
        await self.app(scope, receive, send)

    @staticmethod
    def _is_form(scope: Scope) -> bool:
        for name, value in scope.get("headers", []):
            if name == b"content-type":
                return value.split(b";")[0].strip().lower() == FORM_CONTENT_TYPE
        return False

    @staticmethod
    async def _buffer_body(receive: Receive):
        # The body is consumed here, so hand the app a receive that replays it.
        chunks = []
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            more_body = message.get("more_body", False)
        body = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        return body, replay
