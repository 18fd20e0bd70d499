"""Documentation lookup for step implementations."""

import importlib
import inspect


def resolve_object(handle: str) -> object:
    """Import the object named by a ``module:attribute`` handle.

    The attribute part may be dotted (``steps.login:LoginSteps.click``).

    Raises:
        ValueError: If the handle is not of the form module:attribute
        ImportError: If the module cannot be imported
        AttributeError: If the attribute path does not exist
    """
    module_name, sep, attr_path = handle.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Invalid step handle {handle!r}, expected 'module:attribute'")
    obj: object = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


def docstring_of(handle: str) -> str | None:
    """Return the cleaned docstring of the object named by handle, if any."""
    return inspect.getdoc(resolve_object(handle))
