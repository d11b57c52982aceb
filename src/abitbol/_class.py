"""Class factory and constructor.

A Class is a plain value that carries a member table for its instances,
a dict of class variables and a reference to its parent. New classes are
only made by calling `extend` on an existing one, starting from the root
`Object`.

    Animal = abitbol.Object.extend({
        "__init__": lambda self, name: setattr(self, "name", name),
        "speak": lambda self: f"{self.name} makes a sound",
    })

    @Animal.extend
    class Dog:
        def speak(self):
            return self.super() + " (woof)"

Reserved definition keys:

- `__init__`: initializer run once on construction, inherited when absent
- `__include__`: list of mixin bags, copied in with the lowest precedence
- `__classvars__`: class variables, set on the class instead of instances
- `__name__`: display name of the class
"""

import logging

import abitbol


__all__ = ["Class", "Object", "INIT", "INCLUDE", "CLASSVARS", "NAME"]


logger = logging.getLogger(__name__)


INIT = "__init__"
INCLUDE = "__include__"
CLASSVARS = "__classvars__"
NAME = "__name__"

# Instance attributes that members are not allowed to shadow
_facilities = frozenset(("cls", "super", "method_name"))

# Python descriptors that have no meaning in a member table
_descriptors = (property, classmethod, staticmethod)


class Class:
    """A class value.

    Calling the class constructs an Instance and runs the nearest
    `__init__` in the lineage with the call arguments. Class variables
    are readable, and assignable, as attributes of the class itself.

    Args:
        name: (str) Display name
        parent: (Class | None) Parent class, None for the root

    Attributes:
        name: (str) Display name
        parent: (Class | None) Parent class
        members: (MemberTable) Instance-level members, falling through to
            the parent's table
        statics: (dict) Class variables, including inherited ones
        cls: (Class) The class itself
    """

    __slots__ = ("name", "parent", "members", "statics")

    def __init__(self, name, parent=None):
        table = abitbol.MemberTable(parent.members if parent is not None else None)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "parent", parent)
        object.__setattr__(self, "members", table)
        object.__setattr__(self, "statics", {})

    @property
    def cls(self):
        return self

    def __setattr__(self, name, value):
        if hasattr(Class, name):
            raise AttributeError(f"Class attribute {name!r} is read-only")
        self.statics[name] = value

    def __getattr__(self, name):
        if name in Class.__slots__:
            raise AttributeError(name)
        try:
            return self.statics[name]
        except KeyError:
            raise AttributeError(
                f"Class {self.name!r} has no attribute {name!r}"
            ) from None

    def __repr__(self):
        return f"Class<{self.name}>"

    def __call__(self, *args, **kwargs):
        instance = abitbol.Instance(self)
        init = self.members.get(INIT)
        if init is not None:
            init(instance, *args, **kwargs)
        return instance

    def __instancecheck__(self, instance):
        return isinstance(instance, abitbol.Instance) and instance.cls.inherits(self)

    def __subclasscheck__(self, other):
        return isinstance(other, Class) and other.inherits(self)

    def lineage(self):
        """Yield this class then each ancestor, root-most last."""
        cls = self
        while cls is not None:
            yield cls
            cls = cls.parent

    def inherits(self, other):
        """(bool) Whether other is this class or one of its ancestors."""
        return any(cls is other for cls in self.lineage())

    def extend(self, definition=None, /, **members):
        """Create a subclass.

        Members come from the mixins in `__include__` first, then from
        the definition itself, so explicit members always win. Function
        members are wrapped to expose `super` and `method_name` while
        they run. Class variables from `__classvars__` are merged over
        the ones inherited from this class.

        Can be used as a decorator on a plain class statement, whose
        body becomes the definition and whose name names the new class.

        Args:
            definition: (Mapping | type | None) Definition bag
            **members: Additional members, overriding the definition

        Returns:
            Class: The new subclass

        Raises:
            DefinitionError: If the definition, mixins or class variables
                are not mappings, a member shadows an instance facility,
                or a member is a property, classmethod or staticmethod
        """
        bag = abitbol.namespace(definition) if definition is not None else {}
        bag.update(members)

        name = bag.pop(NAME, None)
        if name is None:
            name = definition.__name__ if isinstance(definition, type) else "anonymous"
        include = bag.pop(INCLUDE, None)
        classvars = bag.pop(CLASSVARS, None)

        own = {}
        abitbol.merge_mixins(include, own)
        own.update(bag)

        shadowed = sorted(_facilities.intersection(own))
        if shadowed:
            raise abitbol.DefinitionError(
                f"Member {shadowed[0]!r} would shadow the instance attribute",
                shadowed[0],
            )
        for key, value in own.items():
            if isinstance(value, _descriptors):
                raise abitbol.DefinitionError(
                    f"Member {key!r} is a {type(value).__name__}, only plain "
                    "functions and values are supported", key
                )

        child = Class(name, self)
        for key, value in own.items():
            if abitbol.is_method(value):
                # Mixin functions are not part of the lineage, so no super
                fallback = self.members if key in bag else None
                value = abitbol.wrap_method(value, key, fallback)
            child.members.own[key] = value

        abitbol.merge_statics(self, classvars, child)

        logger.debug(
            "Created %r from %r with %d members and %d class variables",
            child, self, len(child.members.own), len(child.statics),
        )
        return child


Object = Class("Object")
