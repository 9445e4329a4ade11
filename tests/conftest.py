"""Pytest configuration and fixtures."""
import pytest

from planner.entities import Task, Resource
from planner.project import Project
from tests.helpers import make_task


TASK_LINES = [
    "1, Design, 20240101+0900, 20240101+1700",
    "2, Review, 20240101+1600, 20240101+1800, 1",
]

RESOURCE_LINES = [
    "Alice, 1:50",
    "Bob, 2:100, 1:25",
]


@pytest.fixture
def design_task() -> Task:
    return make_task(1, "Design", "2024-01-01 09:00", "2024-01-01 17:00")


@pytest.fixture
def review_task() -> Task:
    return make_task(2, "Review", "2024-01-01 16:00", "2024-01-01 18:00", [1])


@pytest.fixture
def sample_project(design_task, review_task) -> Project:
    """Design/Review project with Alice (1:50) and Bob (2:100, 1:25)."""
    project = Project("sample")
    project.add_task(design_task)
    project.add_task(review_task)
    alice = Resource("Alice")
    alice.add_allocation(1, 50)
    bob = Resource("Bob")
    bob.add_allocation(2, 100)
    bob.add_allocation(1, 25)
    project.add_resource(alice)
    project.add_resource(bob)
    return project


@pytest.fixture
def input_dir(tmp_path):
    """Directory holding tasks.txt and resources.txt for the sample project."""
    (tmp_path / "tasks.txt").write_text("\n".join(TASK_LINES) + "\n", encoding="utf-8")
    (tmp_path / "resources.txt").write_text("\n".join(RESOURCE_LINES) + "\n", encoding="utf-8")
    return tmp_path
