"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest


class RecordingRenderer:
    """Renderer that records each call in order and runs wait actions."""

    def __init__(self):
        self.calls = []

    def render_banner(self):
        self.calls.append(("render_banner",))

    def render_section_header(self, text):
        self.calls.append(("render_section_header", text))

    async def render_wait(self, message, action):
        self.calls.append(("render_wait", message))
        return await action()

    def render_report(self, report):
        self.calls.append(("render_report", report))

    @property
    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def mock_renderer():
    """MagicMock renderer whose render_wait awaits the deferred action."""
    renderer = MagicMock()

    async def run_action(message, action):
        return await action()

    renderer.render_wait = AsyncMock(side_effect=run_action)
    return renderer


@pytest.fixture
def mock_plugin():
    """Mock plugin contributing a single 'echo' command."""
    from codemedic_core.plugin import CommandArgument, CommandRegistration, PluginMetadata

    class MockPlugin:
        metadata = PluginMetadata.create(
            id="test.mock",
            name="Mock Plugin",
            description="Mock plugin for testing",
            author="Tests",
            tags=["mock"],
        )
        analysis_description = "Mock analysis"

        def __init__(self):
            self.received = []

        def register_commands(self):
            return [
                CommandRegistration(
                    name="echo",
                    description="Echo arguments",
                    handler=self.run,
                    arguments=(CommandArgument("Input value", "i", "input"),),
                    examples=("codemedic echo -i hello",),
                )
            ]

        async def initialize(self):
            pass

        async def run(self, args, renderer):
            self.received.append(list(args))
            renderer.render_report({"args": list(args)})
            return 0

    return MockPlugin()
