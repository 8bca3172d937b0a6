from pytest import raises

from annotify.attributes import Description, Name
from annotify.decorators import ATTRIBUTES_ATTR, annotate, attach_attributes
from annotify.errors import (
    AnnotifyError,
    InvalidAnnotationTargetError,
    InvalidAttributeError,
)
from annotify.lookup import attribute_of, attributes
from tests.fixture.example_attributes import Exported, Hidden, Label


def test_annotate_function():
    @annotate(Exported(), Label("x"))
    def func():
        return 1

    assert func() == 1
    assert getattr(func, ATTRIBUTES_ATTR) == (Exported(), Label("x"))


def test_annotate_appends():
    @annotate(Hidden())
    @annotate(Exported())
    def func():
        pass

    assert list(attributes(func)) == [Exported(), Hidden()]


def test_annotate_class_does_not_leak_to_base():
    class Base:
        pass

    @annotate(Exported())
    class Child(Base):
        pass

    assert list(attributes(Base)) == []
    assert list(attributes(Child)) == [Exported()]


def test_subclass_inherits_attributes():
    @annotate(Exported())
    class Base:
        pass

    @annotate(Hidden())
    class Child(Base):
        pass

    assert list(attributes(Child)) == [Hidden(), Exported()]


def test_attach_attributes():
    def func():
        pass

    attach_attributes(func, [Label("a")])
    attach_attributes(func, iter([Label("b")]))
    assert list(attributes(func)) == [Label("a"), Label("b")]


def test_annotate_property_either_order():
    class Service:
        @annotate(Label("outer"))
        @property
        def outer(self) -> int:
            return 1

        @property
        @annotate(Label("inner"))
        def inner(self) -> int:
            return 2

    assert attribute_of(Service.outer, Label) == Label("outer")
    assert attribute_of(Service.inner, Label) == Label("inner")
    assert Service().outer == 1


def test_invalid_attribute():
    with raises(InvalidAttributeError) as exc:

        @annotate(Exported(), "exported")
        def func():
            pass

    assert exc.value.value == "exported"
    assert isinstance(exc.value, TypeError)
    assert isinstance(exc.value, AnnotifyError)


def test_invalid_target():
    with raises(InvalidAnnotationTargetError) as exc:
        annotate(Exported())(42)
    assert exc.value.target == 42

    with raises(InvalidAnnotationTargetError):
        annotate(Exported())(property())


def test_default_attributes():
    @annotate(Name("main"), Description("Entry point"))
    def main():
        pass

    assert attribute_of(main, Name) == "main"
    assert repr(attribute_of(main, Name)) == "Name(main)"
    assert attribute_of(main, Description).text == "Entry point"
