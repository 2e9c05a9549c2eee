"""
Shared pytest fixtures for codemedic-bom tests.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from codemedic_bom import create_plugin


@pytest.fixture
def plugin():
    """Create a BOM plugin instance."""
    return create_plugin()


@pytest.fixture
def mock_renderer():
    """Renderer mock whose render_wait runs the deferred action."""
    renderer = MagicMock()

    async def run_action(message, action):
        return await action()

    renderer.render_wait = AsyncMock(side_effect=run_action)
    return renderer


CSPROJ = """\
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFrameworks>net8.0;net6.0</TargetFrameworks>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="Newtonsoft.Json" Version="13.0.3" />
    <PackageReference Include="Serilog">
      <Version>3.1.1</Version>
    </PackageReference>
  </ItemGroup>
</Project>
"""

PYPROJECT = """\
[project]
name = "tool"
requires-python = ">=3.11"
dependencies = ["requests>=2.31", "rich[jupyter]~=13.0 ; python_version >= '3.11'"]

[project.optional-dependencies]
test = ["pytest"]
"""


@pytest.fixture
def polyglot_repo(tmp_path):
    """Repository with .NET, Python and npm manifests."""
    app = tmp_path / "src" / "App"
    app.mkdir(parents=True)
    (app / "App.csproj").write_text(CSPROJ)

    (tmp_path / "pyproject.toml").write_text(PYPROJECT)
    (tmp_path / "requirements-dev.txt").write_text("# tooling\nblack==24.1.0\n-r requirements.txt\n\n")

    web = tmp_path / "web"
    web.mkdir()
    (web / "package.json").write_text(json.dumps({
        "name": "web",
        "dependencies": {"react": "^18.2.0"},
        "devDependencies": {"vite": "^5.0.0"},
        "engines": {"node": ">=18"},
    }))

    vendored = tmp_path / "node_modules" / "left-pad"
    vendored.mkdir(parents=True)
    (vendored / "package.json").write_text(json.dumps({"dependencies": {"x": "1"}}))
    return tmp_path
