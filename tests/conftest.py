from types import ModuleType

from pytest import fixture

from tests.fixture import example_nested_types, example_types


@fixture(scope="session")
def types_module() -> ModuleType:
    return example_types


@fixture(scope="session")
def nested_types_module() -> ModuleType:
    return example_nested_types
