"""
Catalogue of the SOLID and design pattern demos.

Holds the ordered demo registry and the driver that runs demos one at a
time, by category, or all of them in catalogue order.
"""

import contextlib
import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .error_handler_util import ErrorHandlerUtil, UnknownDemoError
from .settings import get_log_file, get_log_level
from .solid import (
    single_responsibility, open_closed, liskov_substitution,
    interface_segregation, dependency_inversion,
)
from .creational import factories, builder, prototype, singleton
from .structural import adapter, bridge, composite, decorator, facade, flyweight, proxy
from .behavioral import chain_of_responsibility, command, interpreter

logger = logging.getLogger('GoFPatterns.Catalogue')
errors = ErrorHandlerUtil.create_error_context('Catalogue')

BANNER = "GOF Design Patterns"

CATEGORIES = ('solid', 'creational', 'structural', 'behavioral')

CATEGORY_TITLES = {
    'solid': "SOLID",
    'creational': "Creational",
    'structural': "Structural",
    'behavioral': "Behavioral",
}


@dataclass(frozen=True)
class DemoInfo:
    name: str
    category: str
    title: str
    summary: str
    runner: Callable[[], None]


def _demo(module, category: str, title: str, summary: str) -> DemoInfo:
    name = module.__name__.rsplit('.', 1)[-1]
    return DemoInfo(name, category, title, summary, module.run)


DEMO_REGISTRY: Dict[str, DemoInfo] = {demo.name: demo for demo in (
    _demo(single_responsibility, 'solid', "Single Responsibility",
          "A journal keeps entries; persistence lives in a separate repository."),
    _demo(open_closed, 'solid', "Open-Closed",
          "Product filters extended through composable specifications."),
    _demo(liskov_substitution, 'solid', "Liskov Substitution",
          "A square that breaks rectangle expectations, and the fix."),
    _demo(interface_segregation, 'solid', "Interface Segregation",
          "Fat machine interface versus small printer, scanner and fax roles."),
    _demo(dependency_inversion, 'solid', "Dependency Inversion",
          "Research depends on a relationship browser, not on storage."),
    _demo(factories, 'creational', "Factories",
          "Factory functions, factory methods, inner and abstract factories."),
    _demo(builder, 'creational', "Builder",
          "Fluent, stepwise, functional and faceted builders."),
    _demo(prototype, 'creational', "Prototype",
          "Deep copies of a person via copy methods, JSON and pickle."),
    _demo(singleton, 'creational', "Singleton",
          "One database instance, monostate and ambient context."),
    _demo(adapter, 'structural', "Adapter",
          "Vector images rasterized to points with a line cache."),
    _demo(bridge, 'structural', "Bridge",
          "Shapes decoupled from raster and vector renderers."),
    _demo(composite, 'structural', "Composite",
          "Directory trees and neurons connected like layers."),
    _demo(decorator, 'structural', "Decorator",
          "Pizzas wrapped with cheese and tomato toppings."),
    _demo(facade, 'structural', "Facade",
          "An IDE over editor, compiler and runtime; a magic square generator."),
    _demo(flyweight, 'structural', "Flyweight",
          "Shared figures drawn with extrinsic color and position."),
    _demo(proxy, 'structural', "Proxy",
          "Logging, caching and preview proxies around a book."),
    _demo(chain_of_responsibility, 'behavioral', "Chain of Responsibility",
          "An ATM dispensing thousands, hundreds, tens and ones."),
    _demo(command, 'behavioral', "Command",
          "Bank account deposits and withdrawals with undo."),
    _demo(interpreter, 'behavioral', "Interpreter",
          "Expression trees and a tiny arithmetic language."),
)}


def normalize_name(name: str) -> str:
    return name.strip().lower().replace('-', '_')


def _check_category(category: str) -> str:
    key = normalize_name(category)
    if key not in CATEGORIES:
        errors.log_and_raise(
            f"Unknown category '{category}'. Valid categories: {', '.join(CATEGORIES)}",
            exception_class=UnknownDemoError
        )
    return key


def list_demos(category: Optional[str] = None) -> List[DemoInfo]:
    """
    List demos in catalogue order.

    Args:
        category: Restrict to one category (default: all)

    Raises:
        UnknownDemoError: if the category does not exist
    """
    if category is None:
        return list(DEMO_REGISTRY.values())
    key = _check_category(category)
    return [demo for demo in DEMO_REGISTRY.values() if demo.category == key]


def get_demo(name: str) -> DemoInfo:
    demo = DEMO_REGISTRY.get(normalize_name(name))
    if demo is None:
        errors.log_and_raise(
            f"Unknown demo '{name}'. Valid demos: {', '.join(DEMO_REGISTRY)}",
            exception_class=UnknownDemoError
        )
    return demo


def run_demo(name: str) -> None:
    demo = get_demo(name)
    logger.debug("Running demo %s", demo.name)
    demo.runner()


def run_demos(names: List[str]) -> List[str]:
    """
    Run the named demos in the given order, logging failures and continuing.

    Every name is resolved before anything runs, so an unknown name runs
    nothing.

    Raises:
        UnknownDemoError: if any name is not in the catalogue

    Returns:
        Names of the demos that raised.
    """
    return _run_guarded([get_demo(name) for name in names])


def _run_guarded(demos: List[DemoInfo]) -> List[str]:
    failed = []
    for demo in demos:
        try:
            logger.debug("Running demo %s", demo.name)
            demo.runner()
        except Exception as e:
            errors.log_and_continue(e, context=f"Demo '{demo.name}'")
            failed.append(demo.name)
    return failed


def run_category(category: str) -> List[str]:
    """Run every demo of a category; return the names of demos that failed."""
    return _run_guarded(list_demos(category))


def run_all() -> List[str]:
    """
    Run the whole catalogue: banner, SOLID, then each pattern category.

    Returns:
        Names of the demos that raised; the remaining demos still run.
    """
    print(BANNER)
    failed = []
    for category in CATEGORIES:
        print(f"\n{CATEGORY_TITLES[category]}")
        failed.extend(run_category(category))
    if failed:
        logger.warning("%d demo(s) failed: %s", len(failed), ", ".join(failed))
    return failed


def capture_demo_output(name: str) -> str:
    """Run a demo with stdout redirected and return what it printed."""
    demo = get_demo(name)
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        demo.runner()
    return buffer.getvalue()


def configure_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the GoFPatterns logger hierarchy.

    Console output only shows CRITICAL messages unless a lower level is
    requested, so demo output on stdout stays clean. A debug file handler
    is added when a log file is given or configured.
    """
    root = logging.getLogger('GoFPatterns')
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level if level is not None else get_log_level())
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    log_file = log_file or get_log_file()
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root.addHandler(file_handler)

    root.setLevel(logging.DEBUG)
    return root
