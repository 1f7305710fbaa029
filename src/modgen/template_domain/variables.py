"""Variable declarations: a flat list of names, or names split by resolution strategy."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FlatVariables:
    """``variables: [a, b]`` -- every name is a plain value variable."""

    names: tuple[str, ...] = ()

    @property
    def filepath_names(self) -> tuple[str, ...]:
        return ()

    @property
    def value_names(self) -> tuple[str, ...]:
        return self.names


@dataclass(frozen=True)
class SplitVariables:
    """``variables: {filepaths: [...], value: [...]}``.

    Filepath variables are bound to the contents of a file chosen by the
    operator; value variables are bound to the typed-in string.
    """

    filepaths: tuple[str, ...] = ()
    values: tuple[str, ...] = ()

    @property
    def filepath_names(self) -> tuple[str, ...]:
        return self.filepaths

    @property
    def value_names(self) -> tuple[str, ...]:
        return self.values


VariableSpec = FlatVariables | SplitVariables


@dataclass(frozen=True)
class Defaults:
    """Default answers, keyed by variable name, for each resolution strategy."""

    filepaths: dict[str, str] = field(default_factory=dict)
    values: dict[str, str] = field(default_factory=dict)
