"""
WSGI middleware letting HTML forms reach PATCH/PUT/DELETE routes.

Browsers only submit GET and POST, so forms post to ``/works/1?_method=PATCH``
or send an ``X-HTTP-Method-Override`` header.
"""

from urllib.parse import parse_qs

ALLOWED_METHODS = frozenset(['PATCH', 'PUT', 'DELETE'])


class MethodOverrideMiddleware:
    def __init__(self, app, input_name='_method'):
        self.app = app
        self.input_name = input_name

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE')
            if not method:
                values = parse_qs(environ.get('QUERY_STRING', '')).get(self.input_name)
                method = values[0] if values else None
            if method and method.upper() in ALLOWED_METHODS:
                environ['REQUEST_METHOD'] = method.upper()
        return self.app(environ, start_response)
