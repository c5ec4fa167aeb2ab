# errors.py
"""Error boundaries.

A route-subtree boundary is attached to each page blueprint: a fault in one
of its views renders ``error.html`` with a retry link back to the same URL.
Anything not caught there reaches the application boundary, which renders a
fixed ``global_error.html`` with no retry.
"""
import uuid

from flask import current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

DEFAULT_MESSAGE = "An unexpected error occurred."


class RenderFault(Exception):
    """A fault raised while producing a page.

    ``digest`` is an opaque identifier shown to the user as-is so the fault
    can be matched against the server log.
    """

    def __init__(self, message: str = "", digest: str | None = None):
        super().__init__(message)
        self.message = message
        self.digest = digest


def _describe(e: Exception) -> tuple[str, str]:
    message = getattr(e, "message", None) or str(e) or DEFAULT_MESSAGE
    digest = getattr(e, "digest", None) or uuid.uuid4().hex[:10]
    return message, digest


def subtree_boundary(e: Exception):
    if isinstance(e, HTTPException):
        return e
    message, digest = _describe(e)
    current_app.logger.exception("render fault on %s [digest=%s]", request.path, digest)
    return render_template("error.html", message=message, digest=digest, retry_url=request.path), 500


def api_boundary(e: Exception):
    if isinstance(e, HTTPException):
        return jsonify({"ok": False, "error": e.description}), e.code
    message, digest = _describe(e)
    current_app.logger.exception("api fault on %s [digest=%s]", request.path, digest)
    return jsonify({"ok": False, "error": message, "digest": digest}), 500


def application_boundary(e: Exception):
    if isinstance(e, HTTPException):
        return e
    current_app.logger.exception("unhandled fault on %s", request.path)
    return render_template("global_error.html"), 500


def page_not_found(e):
    return render_template("404.html"), 404


def register_error_handlers(app):
    app.register_error_handler(404, page_not_found)
    app.register_error_handler(Exception, application_boundary)
