"""Composition root that owns one View/Model/Controller/Facade set.

Application entry points create one :class:`CoreContainer`, call
:meth:`CoreContainer.build` and hand the returned facade to whatever needs
it. Tests use :meth:`CoreContainer.dispose` to get a clean process state
back.
"""

from __future__ import annotations

import logging
from typing import Optional, Type

from ..core.controller import Controller
from ..core.facade import Facade
from ..core.model import Model
from ..core.settings import CoreSettings
from ..core.view import View


class CoreContainer:
    """Construct the core registries once and inject them into each other.

    Call chain:
        ``build`` creates the View first (it carries the dispatch settings),
        then the Model, then a Controller bound to that View, and finally the
        facade with all three injected. Each constructor claims its singleton
        slot, so extension classes that fall back to ``Facade.get_instance()``
        see exactly these objects.
    """

    def __init__(
        self,
        settings: Optional[CoreSettings] = None,
        *,
        facade_class: Type[Facade] = Facade,
    ) -> None:
        """Store construction parameters; nothing is built yet.

        Args:
            settings: Dispatch settings for the View. Defaults to
                ``CoreSettings.from_env()`` at build time.
            facade_class: Facade subclass to instantiate, for applications
                that override the facade's initialization hooks.
        """
        self._log = logging.getLogger(__name__)
        self._settings = settings
        self._facade_class = facade_class
        self._view: Optional[View] = None
        self._model: Optional[Model] = None
        self._controller: Optional[Controller] = None
        self._facade: Optional[Facade] = None

    @property
    def settings(self) -> Optional[CoreSettings]:
        return self._settings

    @property
    def view(self) -> Optional[View]:
        return self._view

    @property
    def model(self) -> Optional[Model]:
        return self._model

    @property
    def controller(self) -> Optional[Controller]:
        return self._controller

    @property
    def facade(self) -> Optional[Facade]:
        return self._facade

    @property
    def is_built(self) -> bool:
        return self._facade is not None

    def build(self) -> Facade:
        """Create the registries on first call and return the facade.

        A failed build releases every slot it claimed, so the call can be
        retried once the conflicting instance is gone.

        Raises:
            SingletonError: Another View/Model/Controller/Facade already
                occupies its slot (for example one made via ``get_instance``).
        """
        if self._facade is not None:
            return self._facade

        if self._settings is None:
            self._settings = CoreSettings.from_env()

        prior_facade = Facade._instance
        view: Optional[View] = None
        model: Optional[Model] = None
        controller: Optional[Controller] = None
        try:
            view = View(self._settings)
            model = Model()
            controller = Controller(view=view)
            facade = self._facade_class(model=model, view=view, controller=controller)
        except Exception:
            # a facade that failed inside initialize_facade still holds its slot
            partial = Facade._instance if Facade._instance is not prior_facade else None
            _release_slots(facade=partial, controller=controller, model=model, view=view)
            raise

        self._view = view
        self._model = model
        self._controller = controller
        self._facade = facade
        self._log.debug(
            "Core built (facade=%s, settings=%s)",
            type(self._facade).__name__,
            self._settings.to_dict(),
        )
        return self._facade

    def dispose(self) -> None:
        """Unregister everything, fire removal hooks and free the singleton slots.

        Side Effects:
            ``on_remove`` runs for every mediator and proxy still registered.
            Slots are only cleared while they still hold this container's
            objects.
        """
        if self._view is not None:
            for name in list(self._view.mediator_map):
                self._view.remove_mediator(name)
        if self._model is not None:
            for name in list(self._model.proxy_map):
                self._model.remove_proxy(name)
        if self._controller is not None:
            for name in list(self._controller.command_map):
                self._controller.remove_command(name)

        _release_slots(
            facade=self._facade,
            controller=self._controller,
            model=self._model,
            view=self._view,
        )

        self._view = None
        self._model = None
        self._controller = None
        self._facade = None
        self._log.debug("Core disposed")


def _release_slots(
    *,
    facade: Optional[Facade] = None,
    controller: Optional[Controller] = None,
    model: Optional[Model] = None,
    view: Optional[View] = None,
) -> None:
    """Free each singleton slot that still holds the given object."""
    if facade is not None and Facade._instance is facade:
        Facade.reset_instance()
    if controller is not None and Controller._instance is controller:
        Controller.reset_instance()
    if model is not None and Model._instance is model:
        Model.reset_instance()
    if view is not None and View._instance is view:
        View.reset_instance()


def reset_core() -> None:
    """Clear every core singleton slot without touching registered objects."""
    Facade.reset_instance()
    Controller.reset_instance()
    Model.reset_instance()
    View.reset_instance()


__all__ = ["CoreContainer", "reset_core"]
