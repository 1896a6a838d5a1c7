"""Import classes named by dotted paths, such as configured DID resolvers."""

import sys
from importlib import import_module
from importlib.util import find_spec
from types import ModuleType
from typing import Optional

from ..core.error import BaseError


class ModuleLoadError(BaseError):
    """A module exists but failed to import."""


class ClassNotFoundError(BaseError):
    """A class path does not name a class."""


class ClassLoader:
    """Resolve dotted paths to modules and classes."""

    @classmethod
    def load_module(cls, mod_path: str) -> Optional[ModuleType]:
        """
        Import a module by its absolute dotted path.

        Returns:
            The module, or None if no such module exists

        Raises:
            ModuleLoadError: If the module exists but one of its own imports fails

        """
        if mod_path in sys.modules:
            return sys.modules[mod_path]

        try:
            found = find_spec(mod_path)
        except ModuleNotFoundError:
            # a parent package is missing
            return None
        if not found:
            return None

        try:
            return import_module(mod_path)
        except ModuleNotFoundError as err:
            raise ModuleLoadError(f"Unable to import module {mod_path}: {err}") from err

    @classmethod
    def load_class(cls, class_path: str, default_module: str = None) -> type:
        """
        Resolve a class path like `package.module.ClassName` to the class.

        A bare class name is looked up in `default_module`.

        Raises:
            ClassNotFoundError: If the path does not lead to a class
            ModuleLoadError: If the module fails to import

        """
        if "." in class_path:
            mod_path, class_name = class_path.rsplit(".", 1)
        elif default_module:
            mod_path, class_name = default_module, class_path
        else:
            raise ClassNotFoundError(
                f"Cannot resolve class name with no default module: {class_path}"
            )

        module = cls.load_module(mod_path)
        if not module:
            raise ClassNotFoundError(f"Module '{mod_path}' not found")

        resolved = getattr(module, class_name, None)
        if resolved is None:
            raise ClassNotFoundError(
                f"Class '{class_name}' not defined in module: {mod_path}"
            )
        if not isinstance(resolved, type):
            raise ClassNotFoundError(f"Not a class: {mod_path}.{class_name}")
        return resolved


class DeferLoad:
    """A class path that is imported the first time it is used."""

    def __init__(self, cls_path: str):
        """Initialize with a dotted class path."""
        self._cls_path = cls_path
        self._resolved = None

    @property
    def resolved(self) -> type:
        """Accessor for the class, importing it on first access."""
        if self._resolved is None:
            self._resolved = ClassLoader.load_class(self._cls_path)
        return self._resolved

    def __call__(self, *args, **kwargs):
        """Construct an instance of the deferred class."""
        return self.resolved(*args, **kwargs)

    def __repr__(self) -> str:
        """Show the class path."""
        return f"<{self.__class__.__name__}({self._cls_path})>"
