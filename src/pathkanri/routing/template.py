"""URI template parsing and the RouteTemplate frozen dataclass."""

import re
from dataclasses import dataclass

# {name} — anything but braces, at least one character
_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def parse_template(template: str) -> tuple[str, ...]:
    """Return the placeholder names of a URI template, left to right.

    Examples::

        "/"                            -> ()
        "/example/{exampleId}/{slug}"  -> ("exampleId", "slug")
        "/a/{x}/b/{x}"                 -> ("x", "x")
        "/broken/{open"                -> ()

    Repeated names are kept. Unbalanced braces are not placeholders and
    stay part of the literal text.
    """
    return tuple(match.group(1) for match in _PLACEHOLDER.finditer(template))


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A named template together with its parsed placeholder names.

    Static:  ``/login``          (param_names=())
    Param:   ``/users/{id}``     (param_names=("id",))
    """

    name: str
    template: str
    param_names: tuple[str, ...] = ()

    @classmethod
    def from_template(cls, name: str, template: str) -> "RouteTemplate":
        return cls(name=name, template=template, param_names=parse_template(template))

    @property
    def is_static(self) -> bool:
        """True when the template has no placeholders."""
        return not self.param_names
