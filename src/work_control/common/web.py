from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import current_app, jsonify, request

from ..core.exceptions import ApiError, AuthenticationError, AuthorizationError, ValidationError


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def ok(**payload):
    return jsonify({"success": True, **payload})


def services_required(container):
    """Resolve the caller's token into a service graph passed as ``services``.

    Failures are reported the same way everywhere: a JSON message, nothing
    retried, no state changed.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = bearer_token()
            if not token:
                return fail("Avtorizatsiya tokeni topilmadi", 401)

            services = None
            try:
                services = container.services_for(token)
                return view(*args, services=services, **kwargs)
            except ValidationError as e:
                return fail(str(e), 400)
            except AuthenticationError as e:
                return fail(str(e), 401)
            except AuthorizationError as e:
                return fail(str(e), 403)
            except ApiError as e:
                status = e.status_code if e.status_code in (401, 403, 404) else 502
                return fail(e.message, status)
            except Exception:
                current_app.logger.exception("unhandled error in %s", view.__name__)
                return fail("Server xatosi", 500)
            finally:
                if services is not None:
                    services.close()

        return wrapper

    return decorator


def arg(name: str, default: str = "") -> str:
    return (request.args.get(name) or default).strip()
