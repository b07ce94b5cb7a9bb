"""Dependency injection container.

A small registry mapping port types to factories, so the CLI wires the
production adapters while tests can register fakes for any port.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .config import AppConfig, get_config

PathLike = Union[str, Path]


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        container = Container.create_default("words.dic", "words.pal", "words.path")
        service = container.resolve(WordPathService)

        container = Container()
        container.register(PathSolverPort, lambda: FakeSolver())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance built earlier."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance for ``port_type``, building it on first use.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._instances:
            try:
                factory = self._factories[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None
            self._instances[port_type] = factory()
        return self._instances[port_type]

    @classmethod
    def create_default(
        cls,
        dictionary_path: PathLike,
        queries_path: PathLike,
        output_path: PathLike,
        config: Optional[AppConfig] = None,
    ) -> Container:
        """Create a container bound to the text file adapters.

        Args:
            dictionary_path: Dictionary file.
            queries_path: Query file.
            output_path: File the answers are written to.
            config: Optional configuration override.
        """
        from .adapters.dictionary import TextDictionaryRepository
        from .adapters.graph import DijkstraPathSolver
        from .adapters.output import TextPathWriter
        from .adapters.queries import TextQueryReader
        from .ports.dictionary import DictionaryRepositoryPort
        from .ports.graph import PathSolverPort
        from .ports.queries import PathWriterPort, QuerySourcePort
        from .services import WordPathService

        config = config or get_config()
        container = cls(config=config)
        encoding = config.io.encoding

        container.register(
            DictionaryRepositoryPort,
            lambda: TextDictionaryRepository(
                Path(dictionary_path), config=config.graph, encoding=encoding
            ),
        )
        container.register(
            QuerySourcePort,
            lambda: TextQueryReader(Path(queries_path), encoding=encoding),
        )
        container.register(
            PathWriterPort,
            lambda: TextPathWriter(Path(output_path), encoding=encoding),
        )
        container.register(
            PathSolverPort,
            lambda: DijkstraPathSolver(
                enforce_query_bound=config.solver.enforce_query_bound
            ),
        )

        def create_service() -> WordPathService:
            return WordPathService(
                dictionary=container.resolve(DictionaryRepositoryPort),
                solver=container.resolve(PathSolverPort),
                config=config,
            )

        container.register(WordPathService, create_service)

        return container
