"""Base class for stack states.

A state is a unit of behaviour that is only active while it sits on
top of the StateManager's stack. The manager calls ``on_enter`` when
the state becomes the top and ``on_exit`` when it stops being the top,
whether something was pushed above it or it was popped itself.

Any object with callable ``on_enter`` and ``on_exit`` can be pushed;
subclassing State is a convenience, not a requirement.
"""


class State:
    """Base class for all stack states."""

    name: str = "State"

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        # Subclasses without their own label are named after the class
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    def on_enter(self) -> None:
        """Called each time this state becomes the active state.

        Show UI, bind input, start gameplay systems. Must not assume any
        particular state was active before.
        """

    def on_exit(self) -> None:
        """Called each time this state stops being the active state.

        Undo whatever on_enter set up; the state may be entered again later.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
