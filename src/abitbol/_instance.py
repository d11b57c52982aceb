"""Instances of abitbol classes"""

import types

import abitbol


__all__ = ["Instance"]


class Instance:
    """Object produced by calling a Class.

    Own properties live in the regular instance dict, so `vars(instance)`
    lists exactly what methods and callers assigned. Anything not found
    there is resolved through the class's member table and its ancestors;
    function members come back bound to the instance.

    Args:
        cls: (Class) Class being instantiated

    Attributes:
        cls: (Class) The exact class this instance was constructed from
        super: (callable) Ancestor implementation of the running method,
            only while a method runs on this instance
        method_name: (str) Member name of the running method, only while
            a method runs on this instance
    """

    __slots__ = ("__cls", "__dict__")

    def __init__(self, cls):
        self.__cls = cls

    @property
    def cls(self):
        return self.__cls

    @property
    def super(self):
        call = abitbol._method.current_call(self)
        if call is None:
            raise AttributeError("super is only available while a method runs")
        return call.invoke_super

    @property
    def method_name(self):
        call = abitbol._method.current_call(self)
        if call is None:
            raise AttributeError("method_name is only available while a method runs")
        return call.name

    def __getattr__(self, name):
        if name == "_Instance__cls":
            raise AttributeError(name)
        found = self.__cls.members.lookup(name)
        if found is None:
            raise AttributeError(
                f"{self.__cls.name!r} instance has no attribute {name!r}"
            )
        value = found[1]
        if abitbol.is_method(value):
            return types.MethodType(value, self)
        return value

    def __dir__(self):
        names = set(super().__dir__())
        names.update(self.__cls.members)
        if abitbol._method.current_call(self) is None:
            names.difference_update(("super", "method_name"))
        return sorted(names)

    def __repr__(self):
        return f"Instance<{self.__cls.name}>"
