"""Mixin and class variable merging"""

from collections.abc import Mapping

import abitbol


__all__ = ["merge_mixins", "merge_statics", "namespace"]


# Entries a class statement adds to its namespace on its own
_class_bookkeeping = frozenset(
    ("__module__", "__qualname__", "__dict__", "__weakref__", "__doc__",
     "__firstlineno__", "__static_attributes__", "__annotations__",
     "__annotate__", "__annotate_func__", "__annotations_cache__", "__classcell__")
)


def namespace(bag, what="definition", key=None):
    """Convert a property bag into a plain dict.

    Bags are normally mappings. A plain Python class is also accepted,
    in which case its body namespace is used, minus the entries the
    interpreter adds to every class statement.

    Args:
        bag: (Mapping | type) Property bag
        what: (str) Description of the bag for error messages
        key: (str | None) Definition key reported on error

    Returns:
        dict: Copy of the bag's members, in definition order

    Raises:
        DefinitionError: If bag is neither a mapping nor a class
    """
    if isinstance(bag, Mapping):
        return dict(bag)
    if isinstance(bag, type):
        return {
            key: value
            for key, value in vars(bag).items()
            if key not in _class_bookkeeping
        }
    raise abitbol.DefinitionError(
        f"Expected mapping for {what}, got {type(bag).__name__}", key
    )


def merge_mixins(mixins, target):
    """Copy members from each mixin bag into target.

    Bags are applied in list order, so later mixins override earlier
    ones. Callers apply explicit definitions afterwards so those always
    take precedence over anything included here.

    Args:
        mixins: (list[Mapping]) Mixin bags
        target: (dict) Member dict being built
    """
    if mixins is None:
        return
    if isinstance(mixins, (str, bytes, Mapping)) or not hasattr(mixins, "__iter__"):
        raise abitbol.DefinitionError(
            f"Expected list of mixins, got {type(mixins).__name__}",
            abitbol.INCLUDE,
        )
    for index, mixin in enumerate(mixins):
        target.update(namespace(mixin, f"mixin #{index}", abitbol.INCLUDE))


def merge_statics(parent, statics, cls):
    """Attach class variables to a new class.

    Variables inherited from the parent class come first, then the ones
    from this definition override them. Only the class object receives
    them, never its member table.

    Args:
        parent: (Class | None) Parent class, None for the root
        statics: (Mapping | None) Class variables from the definition
        cls: (Class) Class being created

    Raises:
        DefinitionError: If statics is not a mapping, or a variable would
            shadow an attribute of Class itself
    """
    if parent is not None:
        cls.statics.update(parent.statics)
    if statics is None:
        return
    if not isinstance(statics, Mapping):
        raise abitbol.DefinitionError(
            f"Expected mapping for class variables, got {type(statics).__name__}",
            abitbol.CLASSVARS,
        )
    reserved = sorted(
        key for key in statics
        if isinstance(key, str) and hasattr(type(cls), key)
    )
    if reserved:
        raise abitbol.DefinitionError(
            f"Class variable {reserved[0]!r} would shadow the class attribute",
            abitbol.CLASSVARS,
        )
    cls.statics.update(statics)
