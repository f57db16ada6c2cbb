import collections.abc
import typing


class DefaultRegistry(collections.abc.Mapping):
    """Argument name to declared default value.

    Iteration follows the order in which each name was first declared; declaring a
    name again replaces its value without moving it.
    """

    def __init__(self, initial: typing.Optional[typing.Mapping[str, str]] = None):
        self._values: dict[str, str] = {}
        if initial is not None:
            for name, value in initial.items():
                self.set(name, value)

    def set(self, name: str, value: str) -> typing.Optional[str]:
        previous = self._values.get(name)
        # assigning to an existing dict key keeps its original position
        self._values[name] = value
        return previous

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"DefaultRegistry({self._values!r})"
