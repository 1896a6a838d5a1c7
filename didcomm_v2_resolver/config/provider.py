"""Providers bound to classes in an injection context."""

from typing import Union

from ..utils.classloader import DeferLoad
from .base import BaseProvider, BaseSettings


class InstanceProvider(BaseProvider):
    """Always provides the same, already constructed instance."""

    def __init__(self, instance):
        """Initialize the provider with its instance."""
        if instance is None:
            raise ValueError("Cannot bind None as an instance")
        self._instance = instance

    def provide(self, settings: BaseSettings, context):
        """Return the bound instance."""
        return self._instance


class ClassProvider(BaseProvider):
    """
    Constructs a new instance of a class on every request.

    The class may be given as a dotted path, which is only imported when the
    first instance is requested. Constructor arguments wrapped in
    `ClassProvider.Inject` are replaced by the instance the context provides
    for that class.
    """

    class Inject:
        """Marks a constructor argument to be injected from the context."""

        def __init__(self, base_cls: type):
            """Initialize the marker for `base_cls`."""
            self.base_class = base_cls

    def __init__(self, instance_cls: Union[str, type], *ctor_args, **ctor_kwargs):
        """Initialize the provider with a class and its constructor arguments."""
        if isinstance(instance_cls, str):
            instance_cls = DeferLoad(instance_cls)
        self._instance_cls = instance_cls
        self._ctor_args = ctor_args
        self._ctor_kwargs = ctor_kwargs

    @staticmethod
    def _resolve_arg(arg, context):
        if isinstance(arg, ClassProvider.Inject):
            return context.inject(arg.base_class)
        return arg

    def provide(self, settings: BaseSettings, context):
        """Construct a new instance."""
        args = [self._resolve_arg(arg, context) for arg in self._ctor_args]
        kwargs = {
            name: self._resolve_arg(arg, context)
            for name, arg in self._ctor_kwargs.items()
        }
        return self._instance_cls(*args, **kwargs)
