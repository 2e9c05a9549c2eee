"""
Shared pytest fixtures for codemedic-health tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from codemedic_health import create_plugin


@pytest.fixture
def plugin():
    """Create a health plugin instance."""
    return create_plugin()


@pytest.fixture
def mock_renderer():
    """Renderer mock whose render_wait runs the deferred action."""
    renderer = MagicMock()

    async def run_action(message, action):
        return await action()

    renderer.render_wait = AsyncMock(side_effect=run_action)
    return renderer


@pytest.fixture
def sample_repo(tmp_path):
    """A small .NET repository with tests, docs and CI."""
    (tmp_path / "README.md").write_text("# Sample\n")
    (tmp_path / "LICENSE").write_text("MIT\n")
    (tmp_path / ".github" / "workflows").mkdir(parents=True)
    (tmp_path / ".github" / "workflows" / "ci.yml").write_text("on: push\n")

    src = tmp_path / "src" / "App"
    src.mkdir(parents=True)
    (src / "App.csproj").write_text("<Project />\n")
    (src / "Program.cs").write_text("class Program {}\n")
    (src / "Service.cs").write_text("class Service {}\n")

    tests = tmp_path / "test" / "App.Tests"
    tests.mkdir(parents=True)
    (tests / "ServiceTests.cs").write_text("class ServiceTests {}\n")

    (tmp_path / "bin").mkdir()
    (tmp_path / "bin" / "Ignored.cs").write_text("// build output\n")
    return tmp_path
