from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional
from common.constants import CSS_ENGINE_PREFIX, XPATH_ENGINE_PREFIX
from common.exceptions import PageDefinitionError
from enums.locate_strategy import LocateStrategy
from utils.selector_utils import (detect_strategy,
                                  find_xpath_syntax_error,
                                  strip_engine_prefix,
                                  to_playwright_selector)

CLICK = "click"
CLEAR_VALUE = "clear_value"
SET_VALUE = "set_value"
ACTIONS = (CLICK, CLEAR_VALUE, SET_VALUE)


@dataclass(frozen=True)
class Locator:
    """
    Identifies one element of a page: a logical name, the selector text
    exactly as declared, and the strategy used to evaluate it.
    The strategy is detected from the selector when not given.
    """
    name: str
    selector: str
    strategy: Optional[LocateStrategy] = None

    def __post_init__(self):
        if not self.name:
            raise PageDefinitionError("Locator name must not be empty")

        if not self.selector or not strip_engine_prefix(self.selector).strip():
            raise PageDefinitionError(f"Locator '{self.name}' has an empty selector")

        strategy = self.strategy
        if strategy is None:
            strategy = detect_strategy(self.selector)
        elif not isinstance(strategy, LocateStrategy):
            try:
                strategy = LocateStrategy(str(strategy).lower())
            except ValueError:
                raise PageDefinitionError(
                    f"Locator '{self.name}' has unknown strategy '{self.strategy}'") from None
        # Frozen dataclass, so the normalized value is written through object
        object.__setattr__(self, "strategy", strategy)

        self._validate_selector()

    def _validate_selector(self):
        if self.strategy == LocateStrategy.XPATH and self.selector.startswith(CSS_ENGINE_PREFIX):
            raise PageDefinitionError(
                f"Locator '{self.name}' is declared as XPath but uses the css engine prefix")

        if self.strategy == LocateStrategy.CSS and self.selector.startswith(XPATH_ENGINE_PREFIX):
            raise PageDefinitionError(
                f"Locator '{self.name}' is declared as CSS but uses the xpath engine prefix")

        if self.strategy == LocateStrategy.XPATH:
            error = find_xpath_syntax_error(strip_engine_prefix(self.selector))
            if error:
                raise PageDefinitionError(
                    f"Locator '{self.name}' has a malformed XPath selector: {error}")

    @property
    def playwright_selector(self) -> str:
        return to_playwright_selector(self.selector, self.strategy)

    def __str__(self):
        return f"<Locator name='{self.name}' {self.strategy.value}='{self.selector}'>"


@dataclass(frozen=True)
class Step:
    """One primitive interaction of a command."""
    action: str
    target: str
    arg_index: Optional[int] = None

    def __post_init__(self):
        if self.action not in ACTIONS:
            raise PageDefinitionError(f"Unknown action '{self.action}'")
        if self.action == SET_VALUE and (self.arg_index is None or self.arg_index < 0):
            raise PageDefinitionError(f"'{SET_VALUE}' on '{self.target}' needs an argument index")
        if self.action != SET_VALUE and self.arg_index is not None:
            raise PageDefinitionError(f"'{self.action}' on '{self.target}' takes no argument")

    def apply(self, driver, locator: Locator, args: tuple):
        values = () if self.arg_index is None else (args[self.arg_index],)
        getattr(driver, self.action)(locator, *values)


def click(target: str) -> Step:
    return Step(CLICK, target)


def clear_value(target: str) -> Step:
    return Step(CLEAR_VALUE, target)


def set_value(target: str, arg_index: int = 0) -> Step:
    """Set the target's value to the command's positional argument arg_index."""
    return Step(SET_VALUE, target, arg_index)


class Command:
    """
    A named, ordered sequence of steps. Commands are built once together
    with their page definition and never change afterwards.
    """

    def __init__(self, name: str, *steps: Step):
        if not name:
            raise PageDefinitionError("Command name must not be empty")
        if not steps:
            raise PageDefinitionError(f"Command '{name}' has no steps")

        self._name = name
        self._steps = tuple(steps)

    @property
    def name(self) -> str:
        return self._name

    @property
    def steps(self) -> tuple:
        return self._steps

    @property
    def arity(self) -> int:
        indexes = [step.arg_index for step in self._steps if step.arg_index is not None]
        return max(indexes) + 1 if indexes else 0

    @property
    def targets(self) -> set:
        return {step.target for step in self._steps}

    def execute(self, driver, resolve: Callable[[str], Locator], args: tuple):
        if len(args) != self.arity:
            raise TypeError(
                f"Command '{self._name}' takes {self.arity} argument(s) but {len(args)} were given")

        for step in self._steps:
            step.apply(driver, resolve(step.target), args)

    def __str__(self):
        steps = ", ".join(f"{step.action}({step.target})" for step in self._steps)
        return f"<Command {self._name}: {steps}>"

    __repr__ = __str__


def _build_locators(kind: str, declarations: Optional[Mapping]) -> dict:
    locators = {}

    for name, declaration in (declarations or {}).items():
        if isinstance(declaration, Locator):
            if declaration.name != name:
                raise PageDefinitionError(
                    f"{kind.capitalize()} '{name}' is declared with a locator named '{declaration.name}'")
            locators[name] = declaration
        elif isinstance(declaration, tuple):
            if len(declaration) != 2:
                raise PageDefinitionError(
                    f"{kind.capitalize()} '{name}' must be declared as (selector, strategy)")
            selector, strategy = declaration
            locators[name] = Locator(name, selector, strategy)
        else:
            locators[name] = Locator(name, declaration)

    return locators


def _build_commands(commands: Iterable[Command]) -> dict:
    built = {}

    for command in commands:
        if command.name in built:
            raise PageDefinitionError(f"Command '{command.name}' is declared more than once")
        built[command.name] = command

    return built


class PageDefinition:
    """
    Static description of one page: a URL builder, element and section
    locators, and the commands built on them.

    Args:
        name: Page name used in error messages.
        url: Callable (base_url, *params) -> str. Must be pure.
        elements: {name: selector | (selector, strategy) | Locator}
        sections: same shape as elements, for page regions.
        commands: Commands whose steps target declared elements or sections.
    """

    def __init__(self, name: str, url: Callable[..., str],
                 elements: Optional[Mapping] = None,
                 sections: Optional[Mapping] = None,
                 commands: Iterable[Command] = ()):
        if not callable(url):
            raise PageDefinitionError(f"Page '{name}' url must be callable")

        self.name = name
        self._url = url
        self.elements = MappingProxyType(_build_locators("element", elements))
        self.sections = MappingProxyType(_build_locators("section", sections))
        self.commands = MappingProxyType(_build_commands(commands))

        self._check_shared_names()
        self._check_command_targets()

    def _check_shared_names(self):
        # A region may be declared both as element and section, but only identically
        for name in self.elements.keys() & self.sections.keys():
            if self.elements[name] != self.sections[name]:
                raise PageDefinitionError(
                    f"Page '{self.name}' declares '{name}' as element and section with different selectors")

    def _check_command_targets(self):
        for command in self.commands.values():
            for target in sorted(command.targets):
                if self.find_locator(target) is None:
                    raise PageDefinitionError(
                        f"Command '{command.name}' on page '{self.name}' targets undeclared locator '{target}'")

    def build_url(self, base_url: str, *params) -> str:
        return self._url(base_url, *params)

    def find_locator(self, name: str) -> Optional[Locator]:
        if name in self.elements:
            return self.elements[name]
        return self.sections.get(name)

    def __str__(self):
        return f"<PageDefinition {self.name}>"

    __repr__ = __str__
