from typing import Any

from flask import render_template

from express_carrier.errors import ViewDirectiveError

TEMPLATE_SUFFIX = ".html"


class ViewDirective:
    def __init__(self, view_name: str, model: dict[str, Any] | None = None):
        if not view_name or not view_name.strip():
            raise ViewDirectiveError("View name must not be empty")
        self.view_name = view_name
        self.model = dict(model) if model else {}

    @property
    def template_name(self) -> str:
        return self.view_name + TEMPLATE_SUFFIX

    def render(self) -> str:
        # Needs an active Flask app context
        return render_template(self.template_name, **self.model)

    def to_dict(self) -> dict:
        return {"view_name": self.view_name, "model": dict(self.model)}

    def __eq__(self, other) -> bool:
        if not isinstance(other, ViewDirective):
            return NotImplemented
        return self.view_name == other.view_name and self.model == other.model

    def __repr__(self) -> str:
        return f"ViewDirective(view_name={self.view_name!r}, model={self.model!r})"
