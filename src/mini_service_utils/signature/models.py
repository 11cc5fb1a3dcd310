"""Data models for extracted function signatures."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class NamedParameter(BaseModel):
    """A plain identifier parameter: ``a``."""

    kind: Literal["named"] = "named"
    name: str
    position: int


class DefaultedParameter(BaseModel):
    """A parameter with a default value: ``a = 1``.

    Only the name is kept, the default expression is discarded.
    """

    kind: Literal["defaulted"] = "defaulted"
    name: str
    position: int


class RestParameter(BaseModel):
    """A variadic tail parameter: ``...rest``."""

    kind: Literal["rest"] = "rest"
    name: str
    position: int


class StructuredParameter(BaseModel):
    """A destructured parameter: ``{a, b}`` or ``[a, b]``.

    No literal name exists in source, so ``name`` is ``param<position>``.
    """

    kind: Literal["structured"] = "structured"
    name: str
    position: int
    pattern: Literal["object", "array"]


Parameter = Annotated[
    NamedParameter | DefaultedParameter | RestParameter | StructuredParameter,
    Field(discriminator="kind"),
]


class FunctionSignature(BaseModel):
    """Declared signature of a single function expression."""

    kind: Literal[
        "arrow_function", "function", "generator_function", "method", "call"
    ]
    name: str | None = None
    is_async: bool = False
    parameters: list[Parameter] = []

    @property
    def names(self) -> list[str]:
        """Ordered parameter names."""
        return [param.name for param in self.parameters]
