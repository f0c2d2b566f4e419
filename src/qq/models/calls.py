"""Call-site models for syntax-level argument naming."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class CallSite(BaseModel):
    """Location of a running ``qq.log`` call, taken from the caller's frame.

    Lines are 1-based. Columns are 0-based UTF-8 byte offsets, the same unit
    tree-sitter uses, and are ``None`` when the interpreter does not report
    instruction positions.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    line: int
    end_line: int | None = None
    col: int | None = None
    end_col: int | None = None
    function: str = "?"

    @property
    def target_end_line(self) -> int:
        """Line on which the call's closing parenthesis is expected."""
        return self.end_line if self.end_line is not None else self.line


class SourceSpan(BaseModel):
    """Source span for a call expression."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_col: int
    end_line: int
    end_col: int


class IdentifierArgument(BaseModel):
    """Direct reference to a variable."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["identifier"] = "identifier"
    name: str

    @property
    def display_name(self) -> str:
        return self.name


class CompoundArgument(BaseModel):
    """Expression rendered back to normalized source text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["compound"] = "compound"
    text: str

    @property
    def display_name(self) -> str:
        return self.text


class LiteralArgument(BaseModel):
    """Argument with no meaningful name; shown as a bare value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"

    @property
    def display_name(self) -> str:
        return ""


ArgumentNode = Annotated[
    IdentifierArgument | CompoundArgument | LiteralArgument,
    Field(discriminator="kind"),
]


class CallExpression(BaseModel):
    """A recognized ``alias.entry(...)`` call and its classified arguments."""

    span: SourceSpan
    callee_expr: str
    arguments: list[ArgumentNode] = Field(default_factory=list)

    def argument_names(self) -> list[str]:
        return [argument.display_name for argument in self.arguments]


__all__ = [
    "ArgumentNode",
    "CallExpression",
    "CallSite",
    "CompoundArgument",
    "IdentifierArgument",
    "LiteralArgument",
    "SourceSpan",
]
