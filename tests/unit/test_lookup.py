from dataclasses import dataclass
from enum import Enum, Flag
from typing import Annotated

import pytest

from annotify.decorators import annotate
from annotify.lookup import (
    attribute,
    attribute_of,
    attributes,
    attributes_of,
    enum_attribute,
)
from annotify.members import member
from tests.fixture.example_attributes import (
    DerivedMarker,
    Exported,
    Hidden,
    Label,
    Marker,
    Required,
)


@annotate(Label("first"), Exported(), Label("second"), DerivedMarker())
def decorated():
    pass


def undecorated():
    pass


class Color(Enum):
    RED = 1
    GREEN: Annotated[int, Hidden(), Label("green")] = 2


class Permission(Flag):
    READ = 4
    WRITE: Annotated[int, Hidden()] = 2
    EXECUTE = 1


class Service:
    @annotate(Exported())
    def run(self) -> None:
        pass

    @annotate(Hidden())
    @staticmethod
    def build() -> "Service":
        return Service()

    @property
    @annotate(Label("size"))
    def size(self) -> int:
        return 1


@dataclass
class Shape:
    radius: Annotated[float, Required(), "not an attribute"]
    label: str = ""


def test_attributes_all():
    assert list(attributes(decorated)) == [
        Label("first"),
        Exported(),
        Label("second"),
        DerivedMarker(),
    ]


def test_attributes_filtered():
    assert list(attributes(decorated, Label)) == [
        Label("first"),
        Label("second"),
    ]
    assert list(attributes(decorated, Label, Exported)) == [
        Label("first"),
        Exported(),
        Label("second"),
    ]


def test_attributes_filtered_is_subset():
    for kind in (Label, Exported, Marker, DerivedMarker, Hidden):
        expected = [a for a in attributes(decorated) if isinstance(a, kind)]
        assert list(attributes(decorated, kind)) == expected


def test_attributes_match_subclasses():
    assert list(attributes(decorated, Marker)) == [DerivedMarker()]


def test_attributes_is_rereadable():
    first = attributes(decorated, Label)
    second = attributes(decorated, Label)
    assert first is not second
    assert list(first) == list(second)
    assert list(first) == []


def test_attributes_absent():
    assert list(attributes(undecorated)) == []
    assert list(attributes(object())) == []
    assert list(attributes(1)) == []


def test_attributes_of():
    labels = list(attributes_of(decorated, Label))
    assert [label.text for label in labels] == ["first", "second"]


def test_attribute():
    assert attribute(decorated) == Label("first")
    assert attribute(decorated, Exported) == Exported()
    assert attribute(decorated, Hidden) is None
    assert attribute(undecorated) is None


def test_attribute_of():
    assert attribute_of(decorated, Label) == Label("first")
    assert attribute_of(decorated, Marker) == DerivedMarker()
    assert attribute_of(decorated, Required) is None


def test_methods():
    assert attribute_of(Service.run, Exported) == Exported()
    assert attribute_of(Service().run, Exported) == Exported()
    assert attribute_of(Service.build, Hidden) == Hidden()
    assert attribute_of(Service.size, Label) == Label("size")


def test_members():
    assert list(attributes(member(Service, "size"))) == [Label("size")]
    assert list(attributes(member(Service, "build"))) == [Hidden()]
    assert list(attributes(member(Shape, "radius"))) == [Required()]
    assert list(attributes(member(Shape, "label"))) == []


def test_annotated_alias():
    assert list(attributes(Annotated[int, Required(), 10, Hidden()])) == [
        Required(),
        Hidden(),
    ]
    assert list(attributes(Annotated[int, 10])) == []


def test_enum_attribute():
    assert enum_attribute(Color.GREEN, Hidden) == Hidden()
    assert enum_attribute(Color.GREEN, Label) == Label("green")
    assert enum_attribute(Color.RED, Hidden) is None


def test_enum_value_attributes():
    assert list(attributes(Color.GREEN)) == [Hidden(), Label("green")]
    assert list(attributes(Color.RED)) == []


def test_invalid_kind_propagates():
    with pytest.raises(TypeError):
        list(attributes(decorated, "Label"))


def test_flag_attribute():
    assert enum_attribute(Permission.WRITE, Hidden) == Hidden()
    assert enum_attribute(Permission.READ, Hidden) is None


def test_unresolved_flag_values_are_absent():
    assert enum_attribute(Permission.READ | Permission.WRITE, Hidden) is None
    assert enum_attribute(Permission(0), Hidden) is None
    assert list(attributes(Permission.READ | Permission.WRITE)) == []
    assert list(attributes(Permission(0))) == []
