"""Marshmallow-backed models for DID Documents and their parts."""

import logging
from typing import Optional, Type, TypeVar, Union

from marshmallow import EXCLUDE, Schema, ValidationError, post_dump, post_load

from ...core.error import BaseError
from ...utils.classloader import ClassLoader

LOGGER = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound="BaseModel")


def resolve_class(the_cls, relative_cls: Optional[type] = None) -> type:
    """
    Resolve a class, or a class name relative to the module of `relative_cls`.

    Schema and model classes refer to each other by name in their `Meta`, so
    that either may be defined first.
    """
    if isinstance(the_cls, type):
        return the_cls
    if isinstance(the_cls, str):
        return ClassLoader.load_class(
            the_cls, relative_cls.__module__ if relative_cls else None
        )
    raise TypeError(f"Cannot resolve a class from {type(the_cls).__name__}")


def resolve_meta_property(obj, prop_name: str, defval=None):
    """Look up a `Meta` attribute along the class hierarchy of `obj`."""
    cls = obj if isinstance(obj, type) else type(obj)
    for klass in cls.__mro__:
        meta = vars(klass).get("Meta")
        if meta is not None and hasattr(meta, prop_name):
            return getattr(meta, prop_name)
    return defval


class BaseModelError(BaseError):
    """A model failed to load or dump through its schema."""


class BaseModel:
    """Model with a paired schema named by `Meta.schema_class`."""

    class Meta:
        """BaseModel metadata."""

        schema_class = None

    @classmethod
    def _get_schema_class(cls) -> Type["BaseModelSchema"]:
        schema_cls = resolve_class(cls.Meta.schema_class, cls)
        if not issubclass(schema_cls, BaseModelSchema):
            raise TypeError(f"{schema_cls} is not a BaseModelSchema")
        return schema_cls

    @property
    def Schema(self) -> Type["BaseModelSchema"]:
        """Accessor for the schema class of the model."""
        return self._get_schema_class()

    @classmethod
    def deserialize(
        cls: Type[ModelType],
        obj,
        *,
        unknown: Optional[str] = None,
        none2none: bool = False,
    ) -> Optional[ModelType]:
        """
        Load a model instance from a dict or a JSON string.

        Args:
            obj: The data to load
            unknown: How to treat unknown keys; the schema's `Meta.unknown`,
                else EXCLUDE, by default
            none2none: Return None for None instead of failing

        Raises:
            BaseModelError: If the data does not validate against the schema

        """
        if obj is None and none2none:
            return None

        schema_cls = cls._get_schema_class()
        schema = schema_cls(
            unknown=unknown or resolve_meta_property(schema_cls, "unknown", EXCLUDE)
        )
        try:
            return schema.loads(obj) if isinstance(obj, str) else schema.load(obj)
        except (AttributeError, ValidationError) as err:
            LOGGER.exception("%s validation error:", cls.__name__)
            raise BaseModelError(f"{cls.__name__} schema validation failed") from err

    def serialize(self, *, as_string: bool = False) -> Union[str, dict]:
        """
        Dump the model to a JSON-compatible dict, or a compact JSON string.

        Raises:
            BaseModelError: If the model does not dump through its schema

        """
        schema = self._get_schema_class()()
        try:
            if as_string:
                return schema.dumps(self, separators=(",", ":"))
            return schema.dump(self)
        except (AttributeError, ValidationError) as err:
            LOGGER.exception("%s serialization error:", type(self).__name__)
            raise BaseModelError(
                f"{type(self).__name__} schema validation failed"
            ) from err

    def __eq__(self, other) -> bool:
        """Compare models of the same class by their serialized form."""
        if type(other) is not type(self):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        """Show the model attributes."""
        attrs = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"<{type(self).__name__}({attrs})>"


class BaseModelSchema(Schema):
    """Schema paired with the model named by `Meta.model_class`."""

    class Meta:
        """BaseModelSchema metadata."""

        model_class = None
        skip_values = [None]

    def __init__(self, *args, **kwargs):
        """Initialize the schema; concrete schemas must name a model class."""
        super().__init__(*args, **kwargs)
        if not self.Meta.model_class:
            raise TypeError(
                f"Can't instantiate abstract class {type(self).__name__} "
                "with no model_class"
            )

    @property
    def Model(self) -> type:
        """Accessor for the model class of the schema."""
        return resolve_class(self.Meta.model_class, type(self))

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Build the model from loaded data."""
        return self.Model(**data)

    @post_dump
    def remove_skipped_values(self, data: dict, **kwargs):
        """Drop keys whose values are listed in `Meta.skip_values`."""
        skip_values = resolve_meta_property(self, "skip_values", [])
        return {key: value for key, value in data.items() if value not in skip_values}
