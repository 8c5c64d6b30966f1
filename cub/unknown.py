"""Interfaces identified by numeric ids, and casting between them."""

from __future__ import annotations

from typing import Any, TypeVar

I = TypeVar("I", bound="Interface")

INVALID_IID = 0xFFFFFFFF


class Interface:
    """Base of interfaces; a subclass names its id with `iid=`."""

    IID: int

    def __init_subclass__(cls, iid: int | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if iid is not None:
            cls.IID = iid


def _declares_iid(cls: type) -> bool:
    return "IID" in cls.__dict__


class Unknown(Interface, iid=0xFFFFFFFE):
    """An object that can be asked for any of the interfaces it implements."""

    def cast_to(self, iid: int) -> Any:
        """This object if it implements the interface `iid`, else None."""
        if iid == INVALID_IID:
            return None
        for cls in type(self).__mro__:
            if cls is Unknown or not issubclass(cls, Interface):
                continue
            if _declares_iid(cls) and cls.IID == iid:
                return self
        return None


def unknown_cast(obj: Unknown | None, interface: type[I]) -> I | None:
    """Cast `obj` to `interface`; None if `obj` is None or lacks it."""
    if not (isinstance(interface, type) and issubclass(interface, Interface)) or not _declares_iid(interface):
        raise TypeError(f"{interface!r} is not an interface with an id")
    if obj is None:
        return None
    return obj.cast_to(interface.IID)