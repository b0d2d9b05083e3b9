"""Core registries.

Call context:
    Application code normally reaches these through :class:`Facade`; the
    composition root in ``mvckit.app.container`` builds and tears them down.

Dependencies:
    Modules in this package depend on ``mvckit.domain`` only. Extension base
    classes (``mvckit.patterns``) sit on top and are never imported here.
"""

from .controller import Controller
from .facade import Facade
from .model import Model
from .settings import CoreSettings
from .view import View

__all__ = ["Controller", "CoreSettings", "Facade", "Model", "View"]
