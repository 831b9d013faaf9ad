from collections.abc import Mapping
from typing import Any, Callable, Dict, NamedTuple

from .utils.misc import clone, decamelise


class Accessors(NamedTuple):
    get: Callable[[], Any]
    set: Callable[[Any], 'Access']
    has: Callable[[], bool]
    delete: Callable[[], bool]


class Access:
    """Key-value store with get/set/has/delete verbs.

    Data lives on the instance, so subclasses get their own store for free.
    Use `properties` to give a subclass ``get_<name>()`` style methods.

        >>> a = Access({'colour': 'red'})
        >>> a.get('colour'), a.has('size')
        ('red', False)
    """

    def __init__(self, initial=None):
        self._data: Dict[str, Any] = {}

        if isinstance(initial, Mapping):
            self.update(initial)

    def get(self, name, default=None):
        return self._data.get(name, default)

    def set(self, name, value) -> 'Access':
        self._data[name] = value
        return self

    def has(self, name) -> bool:
        return name in self._data

    __contains__ = has

    def delete(self, name) -> bool:
        """Delete `name`; returns whether there was anything to delete."""
        return self._data.pop(name, _MISSING) is not _MISSING

    def update(self, data: Mapping):
        for name, value in data.items():
            self.set(name, value)

    def to_dict(self) -> Dict[str, Any]:
        """Copy of the stored data for debugging; nested containers are copied too."""
        return clone(self._data)

    def accessors(self, name) -> Accessors:
        """The four verbs bound to a single property name."""
        return Accessors(get=lambda: self.get(name),
                         set=lambda value: self.set(name, value),
                         has=lambda: self.has(name),
                         delete=lambda: self.delete(name))

    def __repr__(self):
        return f'{type(self).__name__}({self._data!r})'


_MISSING = object()

def _make_methods(key):
    def getter(self):
        return self.get(key)

    def setter(self, value):
        return self.set(key, value)

    def checker(self):
        return self.has(key)

    def deleter(self):
        return self.delete(key)

    return {'get': getter, 'set': setter, 'has': checker, 'delete': deleter}

def properties(*names):
    """Class decorator generating ``get_x``, ``set_x``, ``has_x`` and ``delete_x``
    for every name in `names`.

    camelCase names are stored under their snake_case key, so ``'fooBar'``
    gives ``get_foo_bar()`` reading the ``'foo_bar'`` key. Attributes the class
    already defines are kept.

        >>> @properties('colour')
        ... class Shape(Access):
        ...     pass
        >>> Shape().set_colour('red').get_colour()
        'red'
    """
    def decorate(cls):
        for name in names:
            key = decamelise(name)

            for verb, method in _make_methods(key).items():
                attr = f'{verb}_{key}'
                if attr in vars(cls):
                    continue

                method.__name__ = attr
                method.__qualname__ = f'{cls.__qualname__}.{attr}'
                setattr(cls, attr, method)

        return cls

    return decorate
