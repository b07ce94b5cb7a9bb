import pytest

from wordpath.adapters.dictionary import TextDictionaryRepository
from wordpath.adapters.graph import DijkstraPathSolver
from wordpath.config import AppConfig, SolverConfig
from wordpath.container import Container
from wordpath.ports.dictionary import DictionaryRepositoryPort
from wordpath.ports.graph import PathSolverPort
from wordpath.services import WordPathService


@pytest.fixture
def container(tmp_path):
    config = AppConfig(solver=SolverConfig(enforce_query_bound=True))
    return Container.create_default(
        tmp_path / "w.dic", tmp_path / "w.pal", tmp_path / "w.path", config=config
    )


def test_default_bindings(container, tmp_path):
    dictionary = container.resolve(DictionaryRepositoryPort)
    solver = container.resolve(PathSolverPort)

    assert isinstance(dictionary, TextDictionaryRepository)
    assert dictionary.path == tmp_path / "w.dic"
    assert isinstance(solver, DijkstraPathSolver)
    assert solver.enforce_query_bound is True


def test_service_reuses_shared_instances(container):
    service = container.resolve(WordPathService)

    assert service is container.resolve(WordPathService)
    assert service.solver is container.resolve(PathSolverPort)


def test_register_override(container):
    assert isinstance(container.resolve(PathSolverPort), DijkstraPathSolver)
    fake = object()
    container.register(PathSolverPort, lambda: fake)

    assert container.resolve(PathSolverPort) is fake


def test_factory_runs_once():
    calls = []
    container = Container(config=AppConfig())
    container.register(list, lambda: calls.append(1) or calls)

    assert container.resolve(list) is container.resolve(list)
    assert calls == [1]


def test_unregistered_type():
    container = Container(config=AppConfig())

    with pytest.raises(KeyError):
        container.resolve(dict)
