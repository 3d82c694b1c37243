"""engine registry and base types for markdown rendering."""

from typing import Callable, Optional, Protocol, TypeVar

from mdrender.core.models import RenderOptions


class RenderEngine(Protocol):  # pylint: disable=too-few-public-methods
    """protocol for render engines."""

    name: str

    def render(self, text: str, options: RenderOptions) -> str:
        """renders markdown to HTML."""


class EngineRegistry:
    """registry for render engines."""

    def __init__(self) -> None:
        self._engines: dict[str, RenderEngine] = {}

    def register(self, engine_instance: RenderEngine) -> None:
        """registers an engine under its name."""
        self._engines[engine_instance.name] = engine_instance

    def names(self) -> list[str]:
        """returns registered engine names, sorted."""
        return sorted(self._engines)

    def get(self, name: str) -> RenderEngine:
        """
        looks up an engine by name.

        Args:
            name: engine name

        Returns:
            registered engine

        Raises:
            KeyError: if no engine has that name
        """
        try:
            return self._engines[name]
        except KeyError:
            raise KeyError(
                f"Unknown engine: {name} (available: {', '.join(self.names())})"
            ) from None

    def render(
        self, name: str, text: str, options: Optional[RenderOptions] = None
    ) -> str:
        """
        renders markdown using the named engine.

        Args:
            name: engine name
            text: markdown text
            options: render options (defaults to plain)

        Returns:
            rendered HTML string
        """
        return self.get(name).render(text, options or RenderOptions())


# global registry
registry = EngineRegistry()

T = TypeVar("T")


def engine(
    name: str,
    target_registry: EngineRegistry = registry,
) -> Callable[[type[T]], type[T]]:
    """
    decorator to register a render engine.

    Args:
        name: engine name used on the command line
        target_registry: registry to register with (defaults to global)

    Returns:
        decorator function
    """

    def decorator(cls: type[T]) -> type[T]:
        cls.name = name  # type: ignore[attr-defined]
        target_registry.register(cls())  # type: ignore[arg-type]
        return cls

    return decorator


# registers built-in engines
# pylint: disable=wrong-import-position,cyclic-import
from mdrender.engines import commonmark, lite  # noqa: E402,F401
