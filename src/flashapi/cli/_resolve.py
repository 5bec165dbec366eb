"""Import-string resolution for ``flashapi run`` and ``flashapi routes``."""

import pkgutil

from flashapi.app import App


def resolve_app(target: str) -> App:
    """Load the App named by *target* (``"package.module:name"``).

    ``name`` defaults to ``app``. A callable that is not an App is treated
    as a factory and called with no arguments.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the target
    cannot be imported, and ``TypeError`` when it is not an App.
    """
    if ":" not in target:
        target = f"{target}:app"
    obj = pkgutil.resolve_name(target)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"App factory {target!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{target!r} is a {type(obj).__name__}, expected a flashapi.App"
        raise TypeError(msg)
    return obj
