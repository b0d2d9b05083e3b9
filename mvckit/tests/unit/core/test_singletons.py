import pytest

from mvckit.core.controller import Controller
from mvckit.core.facade import Facade
from mvckit.core.model import Model
from mvckit.core.view import View
from mvckit.domain.errors import SingletonError


@pytest.mark.parametrize(
    "cls, message",
    [
        (View, "View singleton already constructed!"),
        (Model, "Model singleton already constructed!"),
        (Controller, "Controller singleton already constructed!"),
        (Facade, "Facade singleton already constructed!"),
    ],
)
def test_second_construction_raises_singleton_error(cls, message):
    first = cls.get_instance()

    with pytest.raises(SingletonError) as excinfo:
        cls()

    assert excinfo.value.message == message
    assert cls.get_instance() is first


def test_get_instance_creates_lazily_and_returns_same_object():
    assert View._instance is None
    view = View.get_instance()
    assert View.get_instance() is view


def test_facade_get_instance_wires_registry_singletons():
    facade = Facade.get_instance()

    assert facade.model is Model.get_instance()
    assert facade.view is View.get_instance()
    assert facade.controller is Controller.get_instance()
    assert Controller.get_instance().view is facade.view


def test_subclass_occupies_base_slot():
    class AppFacade(Facade):
        pass

    app = AppFacade.get_instance()

    assert Facade.get_instance() is app
    with pytest.raises(SingletonError):
        Facade()


def test_reset_instance_allows_new_construction():
    first = Model.get_instance()
    Model.reset_instance()
    second = Model()

    assert second is not first
    assert Model.get_instance() is second
