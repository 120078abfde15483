"""Path parameter validation and string coercion."""

from collections.abc import Mapping, Sequence
from typing import Any

from pathkanri.errors import InvalidParameters, MissingParameters


def param_to_str(value: Any) -> str:
    """Render a parameter value the way it appears in a URL.

    Booleans become ``"true"`` / ``"false"``; everything else goes through
    ``str()``, so integers render in decimal. Composite values are not
    supported and render as their ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def validate_params(
    param_names: Sequence[str],
    params: Mapping[str, Any],
    route_name: str,
    template: str,
) -> None:
    """Check *params* against the placeholder names of *template*.

    The count is checked first: any difference between the number of
    supplied keys and the number of distinct placeholders raises
    ``MissingParameters``, whether there are too few keys or too many.
    With the count right, a key that is not a placeholder raises
    ``InvalidParameters``.

    A repeated placeholder counts once, unlike a plain ``len(param_names)``
    comparison; this is deliberate so ``/a/{x}/b/{x}`` can be built from one key.

    Never called for templates without placeholders.
    """
    required = set(param_names)

    if len(params) != len(required):
        raise MissingParameters(route_name=route_name, template=template)

    if not all(key in required for key in params):
        raise InvalidParameters(route_name=route_name, template=template)
