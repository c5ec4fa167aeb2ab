# extensions.py
from functools import wraps

from flask import current_app
from flask_caching import Cache

cache = Cache()

FORCE_DYNAMIC = "force-dynamic"
BUILT_ONCE = 0


def resolve_interval(interval):
    """Turn a config key such as ``"EVENTS_REVALIDATE"`` into seconds for the current app."""
    if isinstance(interval, str) and interval != FORCE_DYNAMIC:
        return current_app.config[interval]
    return interval


def revalidate(interval):
    """Serve the view from the page cache, rebuilding it every ``interval``.

    ``interval`` is either seconds or the name of an app config key holding
    them, read on each request so ``create_app`` overrides apply.
    ``0`` keeps the first render for the life of the process.
    The interval is stored on the view so responses can advertise it.
    """
    def decorator(view):
        # async views are resolved before the cache sees the result
        @wraps(view)
        def render(*args, **kwargs):
            return current_app.ensure_sync(view)(*args, **kwargs)

        cached_render = cache.cached()(render)

        @wraps(view)
        def cached_view(*args, **kwargs):
            cached_render.cache_timeout = resolve_interval(interval)
            return cached_render(*args, **kwargs)

        cached_view.revalidate = interval
        return cached_view
    return decorator


def built_once(view):
    return revalidate(BUILT_ONCE)(view)


def force_dynamic(view):
    """Mark a view as rendered fresh on every request."""
    view.revalidate = FORCE_DYNAMIC
    return view


def cache_control_for(interval) -> str | None:
    if interval is None:
        return None
    interval = resolve_interval(interval)
    if interval == FORCE_DYNAMIC:
        return "no-store, must-revalidate"
    if interval == BUILT_ONCE:
        return "public, max-age=31536000, immutable"
    return f"public, s-maxage={interval}, stale-while-revalidate"


def describe_cadence(interval) -> str:
    interval = resolve_interval(interval)
    if interval == FORCE_DYNAMIC:
        return FORCE_DYNAMIC
    if interval == BUILT_ONCE:
        return "static"
    return f"revalidate={interval}"
