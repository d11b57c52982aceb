"""Method wrapping for super dispatch and method names.

Every function member of a class is wrapped so that while it runs, the
instance it was called on exposes two transient facilities:

- `super`: invokes the nearest ancestor implementation of the same method,
  bound to the same instance, or does nothing when there is none
- `method_name`: the member name the method was defined under

Neither is ever stored on the instance. Each running method pushes a call
record onto a per-thread stack and pops it again on every exit path, and
the instance properties read the innermost record for that instance. A
method calling another method on itself, or calling its super, nests on
the stack and the outer call's view is back in place once the inner call
returns.
"""

import functools
import inspect
import threading
import types


__all__ = ["wrap_method", "unwrap_method", "is_method"]


_calls = threading.local()


class _Call:
    """Record for one running method invocation.

    Attributes:
        instance: (Instance) Receiver of the call
        name: (str) Member name of the running method
        invoke_super: (callable) Ancestor implementation bound to instance
    """

    __slots__ = ("instance", "name", "invoke_super")

    def __init__(self, instance, name, invoke_super):
        self.instance = instance
        self.name = name
        self.invoke_super = invoke_super

    def __repr__(self):
        return f"_Call<{self.name}>"


def _stack():
    stack = getattr(_calls, "stack", None)
    if stack is None:
        stack = _calls.stack = []
    return stack


def current_call(instance):
    """Innermost running call on instance for this thread, or None."""
    for call in reversed(_stack()):
        if call.instance is instance:
            return call
    return None


def _noop(*args, **kwargs):
    return None


def _super_invoker(instance, name, fallback):
    """Build the super callable for one invocation.

    Ancestor functions found in the table are already wrapped by their
    own class, so invoking them pushes their own call record and their
    own super keeps walking up the lineage.
    """
    if fallback is not None:
        ancestor = fallback.get(name)
        if is_method(ancestor):
            return types.MethodType(ancestor, instance)
    return _noop


def is_method(value):
    """(bool) Whether a member value is a plain function to be wrapped."""
    return inspect.isfunction(value)


def unwrap_method(func):
    """Return the original function behind any method wrappers."""
    while hasattr(func, "__method_name__"):
        func = func.__wrapped__
    return func


def wrap_method(func, name, fallback=None):
    """Wrap a function so it runs with super and method_name available.

    Args:
        func: (function) Function taking the instance as first argument
        name: (str) Member name of the function
        fallback: (MemberTable | None) Table searched for the super
            implementation, normally the parent class's table

    Returns:
        function: Wrapped function
    """
    func = unwrap_method(func)

    @functools.wraps(func)
    def method(self, *args, **kwargs):
        stack = _stack()
        stack.append(_Call(self, name, _super_invoker(self, name, fallback)))
        try:
            return func(self, *args, **kwargs)
        finally:
            stack.pop()

    method.__method_name__ = name
    return method
