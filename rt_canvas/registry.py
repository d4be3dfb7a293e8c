"""Scene catalogue.

Every public module in rt_canvas/scenes/ must define a module-level `scene`
(a Scene) with a draw function registered. Modules are checked as they are
loaded: a module without a scene, a scene without a draw function, or two
scenes claiming the same name raise SceneError, so a broken scene fails at
startup rather than halfway through a render.

The module docstring becomes Scene.doc and drives `rt-canvas help`.
"""

import importlib
import logging
import pkgutil
from types import ModuleType

from rt_canvas.core.errors import SceneError
from rt_canvas.core.types import Scene

logger = logging.getLogger(__name__)

SCENES_PACKAGE = 'rt_canvas.scenes'

_catalogue: dict[str, Scene] = {}


def scene_from_module(module: ModuleType) -> Scene:
    """Return the validated Scene a scene module declares."""
    scene = getattr(module, 'scene', None)
    if not isinstance(scene, Scene):
        raise SceneError(f'{module.__name__} does not define a `scene` object')
    if not scene.has_draw:
        raise SceneError(f'Scene {scene.name!r} in {module.__name__} has no @scene.draw function')
    scene.doc = (module.__doc__ or '').strip()
    return scene


def build_catalogue(modules: list[ModuleType]) -> dict[str, Scene]:
    """Index scenes by name, rejecting duplicates."""
    catalogue: dict[str, Scene] = {}
    for module in modules:
        scene = scene_from_module(module)
        if scene.name in catalogue:
            raise SceneError(f'Scene name {scene.name!r} is declared twice (second in {module.__name__})')
        catalogue[scene.name] = scene
    return catalogue


def _scene_modules() -> list[ModuleType]:
    pkg = importlib.import_module(SCENES_PACKAGE)
    names = sorted(name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_'))
    return [importlib.import_module(f'{SCENES_PACKAGE}.{name}') for name in names]


def discover() -> dict[str, Scene]:
    """Load and validate every scene module once, then return the catalogue."""
    if not _catalogue:
        _catalogue.update(build_catalogue(_scene_modules()))
        logger.debug('Registered scenes: %s', ', '.join(_catalogue))
    return _catalogue


def get(name: str) -> Scene:
    """Get a scene by name."""
    catalogue = discover()
    if name not in catalogue:
        raise KeyError(f'Unknown scene: {name}. Available: {", ".join(sorted(catalogue))}')
    return catalogue[name]


def all_scenes() -> dict[str, Scene]:
    """Return all registered scenes."""
    return discover()
