"""Default attributes implemented by annotify.

Example:
    from annotify import annotate, attribute_of
    from annotify.attributes import Description

    @annotate(Description("Entry point"))
    def main() -> None:
        pass

    print(attribute_of(main, Description).text)
    #> Entry point
"""

from dataclasses import dataclass

from annotify.metadata import BaseAttribute

__all__ = ("Name", "Description")


class Name(str, BaseAttribute):
    """Give a program element an alternative name."""

    def __repr__(self) -> str:
        return f"Name({self})"


@dataclass(frozen=True, slots=True)
class Description(BaseAttribute):
    """Describe a program element."""

    text: str
