"""
Convention Enforcement Tests.

Catch anti-patterns which import-based layer rules cannot detect:
mutable domain records and silent exception swallowing.
"""

import ast
import inspect
from pathlib import Path

from agenntic.domain.interfaces import (
    LargeLanguageModel,
    WorkflowEventStoreInterface,
)
from agenntic.infrastructure.llm import (
    HuggingFaceModel,
    MockModel,
    OllamaModel,
    OpenAIModel,
)
from agenntic.infrastructure.persistence import (
    FilesystemWorkflowEventStore,
    InMemoryWorkflowEventStore,
)

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "agenntic"


def _dataclass_info(filepath: Path) -> list[tuple[str, bool]]:
    """Parse a file and return (class_name, is_frozen) for each @dataclass."""
    tree = ast.parse(filepath.read_text())
    results = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                results.append((node.name, False))
            elif (
                isinstance(decorator, ast.Call)
                and isinstance(decorator.func, ast.Name)
                and decorator.func.id == "dataclass"
            ):
                is_frozen = any(
                    kw.arg == "frozen"
                    and isinstance(kw.value, ast.Constant)
                    and kw.value.value is True
                    for kw in decorator.keywords
                )
                results.append((node.name, is_frozen))
    return results


class TestFrozenDataclassConvention:
    """All domain dataclasses must be frozen."""

    def test_domain_dataclasses_are_frozen(self):
        violations = [
            f"{path.name}:{name}"
            for path in (SRC_ROOT / "domain").glob("*.py")
            for name, is_frozen in _dataclass_info(path)
            if not is_frozen
        ]

        assert not violations, f"Domain dataclasses must be frozen: {violations}"


class TestNoSilentExceptionSwallowing:
    """No bare 'except: pass' or 'except Exception: pass' in src/."""

    def test_no_bare_except_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            tree = ast.parse(py_file.read_text())
            for node in ast.walk(tree):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                if node.type is None:
                    violations.append(f"{py_file.name}:{node.lineno}: bare except")
                    continue
                if len(node.body) == 1 and isinstance(node.body[0], ast.Pass):
                    violations.append(f"{py_file.name}:{node.lineno}: except: pass")

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Implementations must cover every abstract method of their port."""

    @staticmethod
    def _abstract_methods(port: type) -> set[str]:
        return {
            name
            for name, method in inspect.getmembers(port, predicate=inspect.isfunction)
            if getattr(method, "__isabstractmethod__", False)
        }

    def test_models_satisfy_interface(self):
        for impl_cls in [OpenAIModel, OllamaModel, HuggingFaceModel, MockModel]:
            assert issubclass(impl_cls, LargeLanguageModel)
            assert not inspect.isabstract(impl_cls), impl_cls.__name__

    def test_event_stores_satisfy_interface(self):
        abstract = self._abstract_methods(WorkflowEventStoreInterface)
        assert abstract == {"store_event", "get_events"}

        for impl_cls in [InMemoryWorkflowEventStore, FilesystemWorkflowEventStore]:
            assert not inspect.isabstract(impl_cls), impl_cls.__name__
