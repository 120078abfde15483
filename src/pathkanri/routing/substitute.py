"""Placeholder substitution."""

from collections.abc import Mapping, Sequence
from typing import Any

from pathkanri.routing.params import param_to_str


def substitute(template: str, param_names: Sequence[str], params: Mapping[str, Any]) -> str:
    """Replace each placeholder of *template* with its value from *params*.

    Names are consumed in *param_names* order, each replacing the first
    ``{name}`` still present, so a repeated placeholder is filled once
    per occurrence::

        substitute("/example/{exampleId}/{slug}", ("exampleId", "slug"),
                   {"exampleId": 1, "slug": "abcd"})
        -> "/example/1/abcd"

    Assumes ``validate_params`` already passed: every name must be a key
    of *params*.
    """
    path = template
    for name in param_names:
        path = path.replace(f"{{{name}}}", param_to_str(params[name]), 1)
    return path
